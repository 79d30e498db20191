"""Linux and macOS GCS Mounters - gcsfuse driver."""

import logging
import shlex
from typing import List

from .base_mounter import BaseMounter
from .listing_parser import parse_df_listing, parse_macos_df_listing
from .mount_args import build_gcsfuse_args
from ...core.exceptions import MountError, UnmountError
from ...models import MountRequest, MountTable
from ...utils.process import capture_output, run_command


class LinuxMounter(BaseMounter):
    """Linux mount implementation on top of gcsfuse."""

    @property
    def driver(self) -> str:
        return self._settings.posix_driver

    def build_mount_args(self, request: MountRequest) -> List[str]:
        return build_gcsfuse_args(request)

    def launch(self, request: MountRequest, args: List[str]) -> None:
        """
        Run gcsfuse and wait for it.

        gcsfuse daemonizes once the mount is established, so this returns
        as soon as the bucket is visible.
        """
        logging.info(f"Attempting {self.get_platform_name()} mount: {request.remote} -> {request.mountpoint}")
        result = run_command([self.driver] + args)
        if result.returncode != 0:
            raise MountError(request.remote, request.mountpoint, result.returncode, result.stderr)
        logging.info(f"Successfully mounted {request.remote} at {request.mountpoint}")

    def listing_command(self) -> List[str]:
        return ["df", f"--type={self._settings.linux_fs_type}", "--output=source,used,target"]

    def parse_listing(self, output: str) -> MountTable:
        return parse_df_listing(output)

    def list_mountpoints(self) -> MountTable:
        return self.parse_listing(capture_output(self.listing_command()))

    def unmount_command(self, mountpoint: str) -> List[str]:
        return shlex.split(self._settings.linux_unmount_command) + [mountpoint]

    def unmount(self, mountpoint: str) -> bool:
        result = run_command(self.unmount_command(mountpoint))
        if result.returncode != 0:
            raise UnmountError(mountpoint, result.returncode, result.stderr)
        logging.info(f"Successfully unmounted {mountpoint}")
        return True

    def get_platform_name(self) -> str:
        return "Linux"


class MacOSMounter(LinuxMounter):
    """macOS differs from Linux only in how mounts are listed and unmounted."""

    def listing_command(self) -> List[str]:
        return ["df", "-t", self._settings.macos_fs_type]

    def parse_listing(self, output: str) -> MountTable:
        return parse_macos_df_listing(output)

    def unmount_command(self, mountpoint: str) -> List[str]:
        return shlex.split(self._settings.macos_unmount_command) + [mountpoint]

    def get_platform_name(self) -> str:
        return "macOS"
