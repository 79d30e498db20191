"""Abstract Base Mounter - one implementation per platform tag."""

from abc import ABC, abstractmethod
from typing import List

from ...config import Settings
from ...models import CacheType, MountRequest, MountTable


class BaseMounter(ABC):
    """Abstract base class for platform-specific mount operations."""

    default_cache_type: CacheType = CacheType.DISK

    def __init__(self, settings: Settings):
        self._settings = settings

    @property
    @abstractmethod
    def driver(self) -> str:
        """Name of the external mount driver program."""
        pass

    @abstractmethod
    def build_mount_args(self, request: MountRequest) -> List[str]:
        """Build driver arguments for a normalized request. Raises before any side effect."""
        pass

    def ensure_driver(self) -> bool:
        """Return False to skip the operation when the driver is unavailable."""
        return True

    @abstractmethod
    def launch(self, request: MountRequest, args: List[str]) -> None:
        """Start the driver with prebuilt arguments."""
        pass

    @abstractmethod
    def parse_listing(self, output: str) -> MountTable:
        """Parse raw listing command output."""
        pass

    @abstractmethod
    def list_mountpoints(self) -> MountTable:
        """Run the listing command and parse its output."""
        pass

    @abstractmethod
    def unmount(self, mountpoint: str) -> bool:
        """Unmount a mountpoint. Returns False when the unmount was skipped."""
        pass

    @abstractmethod
    def get_platform_name(self) -> str:
        """Get platform name for logging."""
        pass
