"""
gcs-mount

Mount, list and unmount Google Cloud Storage buckets as local directories
through GCSDokan (Windows) or gcsfuse (Linux, macOS).
"""

from .core.exceptions import (
    GcsMountError,
    MissingDriverError,
    MountError,
    ProcessLaunchError,
    UnmountError,
    UnsupportedModeError,
    UnsupportedPlatformError,
)
from .models import CacheType, MountMode, MountRecord, MountRequest, MountTable
from .mounts import list_mountpoints, mount, unmount

__version__ = "0.1.0"

__all__ = [
    # Operations
    "mount",
    "list_mountpoints",
    "unmount",
    # Models
    "CacheType",
    "MountMode",
    "MountRecord",
    "MountRequest",
    "MountTable",
    # Exceptions
    "GcsMountError",
    "MissingDriverError",
    "MountError",
    "ProcessLaunchError",
    "UnmountError",
    "UnsupportedModeError",
    "UnsupportedPlatformError",
]
