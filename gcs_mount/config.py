from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import DEFAULT_IMPLICIT_DIRS, DEFAULT_REFRESH_SECONDS


class Settings(BaseSettings):
    # Driver programs
    windows_driver: str = "GCSDokan"
    posix_driver: str = "gcsfuse"

    # Listing: filesystem type passed to df
    linux_fs_type: str = "fuse"
    macos_fs_type: str = "osxfuse"

    # Unmount commands (mountpoint is appended)
    linux_unmount_command: str = "fusermount -u"
    macos_unmount_command: str = "umount"

    # Mount defaults
    default_refresh_seconds: int = DEFAULT_REFRESH_SECONDS
    default_implicit_dirs: bool = DEFAULT_IMPLICIT_DIRS

    # Behaviour
    raise_on_missing_driver: bool = False  # Windows only; POSIX always raises
    remove_mountpoint_on_unmount: bool = True

    # Logging
    log_level: str = "INFO"
    log_file_path: str = "logs/gcs_mount.log"
    log_retention_days: int = 30

    # HTTP API
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    model_config = SettingsConfigDict(
        env_prefix="GCS_MOUNT_", env_file="settings.env", extra="ignore"
    )

    @property
    def log_directory(self) -> Path:
        """Log directory as a Path object."""
        return Path(self.log_file_path).parent
