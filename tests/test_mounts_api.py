"""
Tests for the mount HTTP API.

The mount service is replaced through FastAPI's dependency overrides, so no
driver or listing command runs.
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from gcs_mount.config import Settings
from gcs_mount.core.exceptions import (
    MissingDriverError,
    MountError,
    ProcessLaunchError,
    UnsupportedModeError,
    UnsupportedPlatformError,
)
from gcs_mount.dependencies import get_mount_service
from gcs_mount.main import app
from gcs_mount.models import CacheType, MountRecord, MountTable
from gcs_mount.services.mount import BaseMounter, GcsMountService


class TestMountsApi:
    @pytest.fixture
    def mock_service(self):
        service = Mock(spec=GcsMountService)
        service.list_mountpoints.return_value = MountTable()
        return service

    @pytest.fixture
    def client(self, mock_service):
        app.dependency_overrides[get_mount_service] = lambda: mock_service
        yield TestClient(app)
        app.dependency_overrides.clear()

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_list_empty(self, client):
        response = client.get("/api/mounts")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_mounts(self, client, mock_service):
        mock_service.list_mountpoints.return_value = MountTable([
            MountRecord(remote="genomics-public-data", mountpoint="/tmp/m"),
            MountRecord(remote="bucket", mountpoint="/mnt/b"),
        ])

        response = client.get("/api/mounts")

        assert response.json() == [
            {"remote": "genomics-public-data", "mountpoint": "/tmp/m"},
            {"remote": "bucket", "mountpoint": "/mnt/b"},
        ]

    def test_create_mount(self, client, mock_service):
        response = client.post(
            "/api/mounts",
            json={"remote": "gs://genomics-public-data/clinvar", "mountpoint": "/tmp/m"},
        )

        assert response.status_code == 204
        request = mock_service.mount.call_args.args[0]
        assert request.remote == "genomics-public-data/clinvar"
        assert request.mountpoint == "/tmp/m"

    def test_create_mount_invalid_body(self, client, mock_service):
        response = client.post("/api/mounts", json={"remote": "gs://", "mountpoint": "/tmp/m"})

        assert response.status_code == 422
        mock_service.mount.assert_not_called()

    @pytest.mark.parametrize(
        "error, status_code",
        [
            (UnsupportedModeError("File writing is not supported on Windows"), 400),
            (UnsupportedPlatformError("sunos"), 501),
            (ProcessLaunchError(["gcsfuse"], "No such file or directory"), 502),
            (MountError("bucket", "/tmp/m", 1, "bucket does not exist"), 502),
            (MissingDriverError("GCSDokan"), 503),
        ],
    )
    def test_create_mount_errors(self, client, mock_service, error, status_code):
        mock_service.mount.side_effect = error

        response = client.post("/api/mounts", json={"remote": "bucket", "mountpoint": "/tmp/m"})

        assert response.status_code == status_code
        assert response.json()["detail"] == str(error)

    def test_delete_mount(self, client, mock_service):
        response = client.delete("/api/mounts", params={"mountpoint": "/tmp/m"})

        assert response.status_code == 204
        mock_service.unmount.assert_called_once_with("/tmp/m")

    def test_delete_requires_mountpoint(self, client):
        response = client.delete("/api/mounts")

        assert response.status_code == 422

    def test_platform(self, client, mock_service):
        mock_service.get_platform_info.return_value = {"platform": "linux", "driver": "gcsfuse"}

        response = client.get("/api/platform")

        assert response.json()["driver"] == "gcsfuse"


class TestMountDefaultsFromEnvironment:
    """A real service behind the router, with only the platform mounter mocked."""

    @pytest.fixture
    def mounter(self):
        mounter = Mock(spec=BaseMounter)
        mounter.default_cache_type = CacheType.DISK
        mounter.build_mount_args.return_value = []
        mounter.ensure_driver.return_value = True
        return mounter

    @pytest.fixture
    def client(self, mounter, monkeypatch):
        monkeypatch.setenv("GCS_MOUNT_DEFAULT_REFRESH_SECONDS", "5")
        monkeypatch.setenv("GCS_MOUNT_DEFAULT_IMPLICIT_DIRS", "false")
        service = GcsMountService(Settings(_env_file=None), mounter=mounter)
        app.dependency_overrides[get_mount_service] = lambda: service
        yield TestClient(app)
        app.dependency_overrides.clear()

    def test_unset_options_use_environment_defaults(self, client, mounter, tmp_path):
        response = client.post(
            "/api/mounts", json={"remote": "bucket", "mountpoint": str(tmp_path / "m")}
        )

        assert response.status_code == 204
        request = mounter.launch.call_args.args[0]
        assert request.refresh == 5
        assert request.implicit_dirs is False

    def test_body_options_win(self, client, mounter, tmp_path):
        response = client.post(
            "/api/mounts",
            json={
                "remote": "bucket",
                "mountpoint": str(tmp_path / "m"),
                "refresh": 120,
                "implicit_dirs": True,
            },
        )

        assert response.status_code == 204
        request = mounter.launch.call_args.args[0]
        assert request.refresh == 120
        assert request.implicit_dirs is True
