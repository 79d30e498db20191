"""Platform Factory - platform detection and mounter creation."""

import platform

from .base_mounter import BaseMounter
from ...config import Settings
from ...core.exceptions import UnsupportedPlatformError

WINDOWS = "windows"
LINUX = "linux"
MACOS = "macos"


class PlatformFactory:
    """Factory for creating platform-specific mount implementations."""

    def detect_platform(self) -> str:
        """Detect current platform. Returns: windows, linux or macos."""
        system = platform.system().lower()

        if system == "darwin":
            return MACOS
        elif system == "windows":
            return WINDOWS
        elif system == "linux":
            return LINUX
        else:
            raise UnsupportedPlatformError(system)

    def create_mounter(self, settings: Settings) -> BaseMounter:
        """Create platform-specific mounter instance."""
        platform_name = self.detect_platform()

        if platform_name == WINDOWS:
            from .windows_mounter import WindowsMounter
            return WindowsMounter(settings)
        elif platform_name == MACOS:
            from .posix_mounter import MacOSMounter
            return MacOSMounter(settings)
        else:
            from .posix_mounter import LinuxMounter
            return LinuxMounter(settings)
