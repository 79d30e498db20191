# gcs_mount/core/exceptions.py


class GcsMountError(Exception):
    """Base class for all mount management errors."""
    pass


class UnsupportedPlatformError(GcsMountError):
    """Raised when the host platform has no mount driver support."""
    def __init__(self, system: str):
        self.system = system
        super().__init__(f"Platform {system} not supported for GCS mounting")


class MissingDriverError(GcsMountError):
    """Raised when the external mount driver is not on PATH."""
    def __init__(self, program: str):
        self.program = program
        super().__init__(f"Required program '{program}' was not found on PATH")


class UnsupportedModeError(GcsMountError):
    """Raised when a mount option combination is not supported by the driver."""
    pass


class ProcessLaunchError(GcsMountError):
    """Raised when an external command could not be started."""
    def __init__(self, command: list[str], reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"Could not launch '{command[0]}': {reason}")


class MountError(GcsMountError):
    """Raised when the mount driver exits with a failure."""
    def __init__(self, remote: str, mountpoint: str, returncode: int, stderr: str = ""):
        self.remote = remote
        self.mountpoint = mountpoint
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"Mounting {remote} at {mountpoint} failed "
            f"(exit code {returncode}): {stderr.strip() or 'Unknown error'}"
        )


class UnmountError(GcsMountError):
    """Raised when the unmount command exits with a failure."""
    def __init__(self, mountpoint: str, returncode: int, stderr: str = ""):
        self.mountpoint = mountpoint
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(
            f"Unmounting {mountpoint} failed "
            f"(exit code {returncode}): {stderr.strip() or 'Unknown error'}"
        )
