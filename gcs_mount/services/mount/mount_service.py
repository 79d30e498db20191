"""GCS Mount Service - orchestrates mount, listing and unmount across platforms."""

import logging
import os
import re
from typing import Optional

from .base_mounter import BaseMounter
from .mount_config import MountConfigHandler
from .platform_factory import PlatformFactory
from ...config import Settings
from ...core.exceptions import GcsMountError
from ...models import CacheType, MountRequest, MountTable

DRIVE_LETTER = re.compile(r"^[A-Za-z]:[\\/]?$")


def normalize_path(path: str) -> str:
    """Absolute, normalized path. Bare Windows drive letters are kept as given."""
    if DRIVE_LETTER.match(path):
        return path
    return os.path.normpath(os.path.abspath(os.path.expanduser(path)))


class GcsMountService:
    """
    Facade over the platform mounter.

    No mount state is kept: the only cached object is the mounter, which
    depends on nothing but the host platform. It is created on first use, so
    an unsupported host fails on the first operation rather than at
    construction.
    """

    def __init__(self, settings: Settings, mounter: Optional[BaseMounter] = None):
        self._settings = settings
        self._config = MountConfigHandler(settings)
        self._platform_factory = PlatformFactory()
        self._mounter = mounter

    @property
    def config(self) -> MountConfigHandler:
        return self._config

    def _get_mounter(self) -> BaseMounter:
        if self._mounter is None:
            self._mounter = self._platform_factory.create_mounter(self._settings)
            logging.debug(f"Initialized {self._mounter.get_platform_name()} mounter")
        return self._mounter

    def normalize_request(self, request: MountRequest, mounter: BaseMounter) -> MountRequest:
        """Resolve paths, configured option defaults and the platform's default cache type."""
        request = self._config.apply_defaults(request)
        cache_type = request.cache_type or mounter.default_cache_type
        cache_arg = request.cache_arg
        if cache_arg and cache_type == CacheType.DISK:
            cache_arg = normalize_path(cache_arg)

        return request.model_copy(
            update={
                "mountpoint": normalize_path(request.mountpoint),
                "cache_type": cache_type,
                "cache_arg": cache_arg,
            }
        )

    def _prepare_directories(self, request: MountRequest) -> None:
        """Create the mountpoint and disk cache directory if absent."""
        if not DRIVE_LETTER.match(request.mountpoint) and not os.path.isdir(request.mountpoint):
            logging.info(f"Creating mount directory: {request.mountpoint}")
            os.makedirs(request.mountpoint, exist_ok=True)

        if request.cache_type == CacheType.DISK and request.cache_arg:
            os.makedirs(request.cache_arg, exist_ok=True)

    def mount(self, request: MountRequest) -> None:
        """
        Mount a bucket (or a path inside it) at the request's mountpoint.

        Option errors are raised before any directory is created or process
        started. No readiness check is made after launching the driver.
        """
        mounter = self._get_mounter()
        request = self.normalize_request(request, mounter)

        try:
            args = mounter.build_mount_args(request)
            if not mounter.ensure_driver():
                return
            self._prepare_directories(request)
            mounter.launch(request, args)
        except GcsMountError as e:
            logging.error(f"Error mounting {request.remote} at {request.mountpoint}: {e}")
            raise

    def list_mountpoints(self) -> MountTable:
        """Currently mounted buckets, in the listing command's order."""
        table = self._get_mounter().list_mountpoints()
        logging.debug(f"Found {len(table)} GCS mountpoint(s)")
        return table

    def unmount(self, mountpoint: str) -> None:
        """
        Unmount a mountpoint and remove its directory once empty.

        The directory is left alone when the mounter skipped the unmount.
        """
        mounter = self._get_mounter()
        mountpoint = normalize_path(mountpoint)

        try:
            unmounted = mounter.unmount(mountpoint)
        except GcsMountError as e:
            logging.error(f"Error unmounting {mountpoint}: {e}")
            raise

        if unmounted and self._settings.remove_mountpoint_on_unmount:
            self._remove_mountpoint(mountpoint)

    def _remove_mountpoint(self, mountpoint: str) -> None:
        if DRIVE_LETTER.match(mountpoint) or not os.path.isdir(mountpoint):
            return
        try:
            os.rmdir(mountpoint)
            logging.debug(f"Removed mount directory: {mountpoint}")
        except OSError as e:
            logging.warning(f"Mount directory {mountpoint} left in place: {e}")

    def get_platform_info(self) -> dict:
        """Get platform and driver information."""
        info = self._config.get_platform_config()
        info["platform"] = self._platform_factory.detect_platform()
        mounter = self._get_mounter()
        info.update({
            "platform_name": mounter.get_platform_name(),
            "driver": mounter.driver,
        })
        return info
