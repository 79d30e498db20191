from unittest.mock import patch

import pytest

from gcs_mount.core.exceptions import UnsupportedPlatformError
from gcs_mount.services.mount.platform_factory import PlatformFactory
from gcs_mount.services.mount.posix_mounter import LinuxMounter, MacOSMounter
from gcs_mount.services.mount.windows_mounter import WindowsMounter

SYSTEM = "gcs_mount.services.mount.platform_factory.platform.system"


class TestPlatformFactory:
    @pytest.mark.parametrize(
        "system, expected",
        [("Windows", "windows"), ("Linux", "linux"), ("Darwin", "macos")],
    )
    def test_detect_platform(self, system, expected):
        with patch(SYSTEM, return_value=system):
            assert PlatformFactory().detect_platform() == expected

    @pytest.mark.parametrize("system", ["FreeBSD", "SunOS", "Java", ""])
    def test_unsupported_platform(self, system):
        with patch(SYSTEM, return_value=system):
            with pytest.raises(UnsupportedPlatformError):
                PlatformFactory().detect_platform()

    @pytest.mark.parametrize(
        "system, mounter_class, platform_name",
        [
            ("Windows", WindowsMounter, "Windows"),
            ("Linux", LinuxMounter, "Linux"),
            ("Darwin", MacOSMounter, "macOS"),
        ],
    )
    def test_create_mounter(self, settings, system, mounter_class, platform_name):
        with patch(SYSTEM, return_value=system):
            mounter = PlatformFactory().create_mounter(settings)

        assert type(mounter) is mounter_class
        assert mounter.get_platform_name() == platform_name

    def test_create_mounter_unsupported(self, settings):
        with patch(SYSTEM, return_value="AIX"):
            with pytest.raises(UnsupportedPlatformError, match="aix"):
                PlatformFactory().create_mounter(settings)
