"""Tests for the module-level mount, list_mountpoints and unmount functions."""

from unittest.mock import Mock, patch

import pytest

import gcs_mount
from gcs_mount.config import Settings
from gcs_mount.models import CacheType, MountMode, MountRecord, MountTable
from gcs_mount.services.mount import BaseMounter, GcsMountService


@pytest.fixture
def mock_mounter():
    mounter = Mock(spec=BaseMounter)
    mounter.default_cache_type = CacheType.DISK
    mounter.build_mount_args.return_value = ["--implicit-dirs"]
    mounter.ensure_driver.return_value = True
    mounter.get_platform_name.return_value = "Linux"
    return mounter


def use_service(service):
    return patch("gcs_mount.mounts.get_mount_service", return_value=service)


class TestModuleFunctions:
    def test_mount_fills_configured_defaults(self, mock_mounter, tmp_path):
        settings = Settings(_env_file=None, default_refresh_seconds=15, default_implicit_dirs=False)
        service = GcsMountService(settings, mounter=mock_mounter)

        with use_service(service):
            gcs_mount.mount("gs://bucket/dir", str(tmp_path / "m"), mode="rw")

        request, args = mock_mounter.launch.call_args.args
        assert request.remote == "bucket/dir"
        assert request.mode == MountMode.READ_WRITE
        assert request.refresh == 15
        assert request.implicit_dirs is False
        assert request.cache_type == CacheType.DISK
        assert args == ["--implicit-dirs"]
        assert (tmp_path / "m").is_dir()

    def test_explicit_options_win(self, mock_mounter, settings, tmp_path):
        service = GcsMountService(settings, mounter=mock_mounter)

        with use_service(service):
            gcs_mount.mount(
                "bucket",
                str(tmp_path / "m"),
                refresh=0,
                implicit_dirs=True,
                key_file="/keys/sa.json",
                additional_args=("--debug_fuse",),
            )

        request = mock_mounter.launch.call_args.args[0]
        assert request.refresh == 0
        assert request.implicit_dirs is True
        assert request.key_file == "/keys/sa.json"
        assert request.additional_args == ["--debug_fuse"]

    def test_invalid_cache_type(self, mock_mounter, settings, tmp_path):
        service = GcsMountService(settings, mounter=mock_mounter)

        with use_service(service):
            with pytest.raises(ValueError):
                gcs_mount.mount("bucket", str(tmp_path / "m"), cache_type="ssd")

    def test_list_mountpoints(self, mock_mounter, settings):
        table = MountTable([MountRecord(remote="bucket", mountpoint="/mnt/b")])
        mock_mounter.list_mountpoints.return_value = table

        with use_service(GcsMountService(settings, mounter=mock_mounter)):
            assert gcs_mount.list_mountpoints() is table

    def test_unmount(self, mock_mounter, settings, tmp_path):
        mountpoint = tmp_path / "m"

        with use_service(GcsMountService(settings, mounter=mock_mounter)):
            gcs_mount.unmount(str(mountpoint))

        mock_mounter.unmount.assert_called_once_with(str(mountpoint))
