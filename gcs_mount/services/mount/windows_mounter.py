"""Windows GCS Mounter - GCSDokan driver."""

import logging
from typing import List

from .base_mounter import BaseMounter
from .listing_parser import parse_dokan_listing
from .mount_args import build_dokan_args
from ...core.exceptions import MissingDriverError, UnmountError
from ...models import CacheType, MountRequest, MountTable
from ...utils.process import capture_output, find_program, launch_detached, run_command


class WindowsMounter(BaseMounter):
    """Windows mount implementation on top of GCSDokan."""

    default_cache_type = CacheType.MEMORY

    @property
    def driver(self) -> str:
        return self._settings.windows_driver

    def build_mount_args(self, request: MountRequest) -> List[str]:
        return build_dokan_args(request)

    def ensure_driver(self) -> bool:
        """
        Check that GCSDokan is on PATH.

        A missing driver only logs a warning unless ``raise_on_missing_driver``
        is set, so callers see a no-op mount and an empty listing.
        """
        if find_program(self.driver):
            return True
        if self._settings.raise_on_missing_driver:
            raise MissingDriverError(self.driver)
        logging.warning(f"{self.driver} not found on PATH, skipping")
        return False

    def launch(self, request: MountRequest, args: List[str]) -> None:
        """Start GCSDokan in the background. Returns before the drive is ready."""
        logging.info(f"Attempting Windows mount: {request.remote} -> {request.mountpoint}")
        launch_detached([self.driver] + args)

    def parse_listing(self, output: str) -> MountTable:
        return parse_dokan_listing(output)

    def list_mountpoints(self) -> MountTable:
        if not self.ensure_driver():
            return MountTable()
        return self.parse_listing(capture_output([self.driver, "-l"]))

    def unmount(self, mountpoint: str) -> bool:
        if not self.ensure_driver():
            return False

        result = run_command([self.driver, "-u", mountpoint])
        if result.returncode != 0:
            raise UnmountError(mountpoint, result.returncode, result.stderr)
        logging.info(f"Successfully unmounted {mountpoint}")
        return True

    def get_platform_name(self) -> str:
        return "Windows"
