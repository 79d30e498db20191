"""
GCS Mount Module

Mounts Google Cloud Storage buckets through external drivers and reads the
active mounts back into one normalized table.

Components:
- GcsMountService: orchestrator (normalization, directories, dispatch)
- PlatformFactory: platform detection and mounter creation
- BaseMounter: per-platform capability interface
- WindowsMounter: GCSDokan
- LinuxMounter / MacOSMounter: gcsfuse, listed through df
- mount_args / listing_parser: pure argument builders and output parsers
"""

from .mount_service import GcsMountService
from .base_mounter import BaseMounter
from .platform_factory import PlatformFactory
from .mount_config import MountConfigHandler

__all__ = [
    "GcsMountService",
    "BaseMounter",
    "PlatformFactory",
    "MountConfigHandler",
]
