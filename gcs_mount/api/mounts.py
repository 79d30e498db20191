from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ..core.exceptions import (
    GcsMountError,
    MissingDriverError,
    UnsupportedModeError,
    UnsupportedPlatformError,
)
from ..dependencies import get_mount_service
from ..models import MountRecord, MountRequest
from ..services.mount import GcsMountService

router = APIRouter(prefix="/api", tags=["mounts"])


def _raise_http_error(error: GcsMountError) -> None:
    """Map mount errors to HTTP status codes."""
    if isinstance(error, UnsupportedModeError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, UnsupportedPlatformError):
        code = status.HTTP_501_NOT_IMPLEMENTED
    elif isinstance(error, MissingDriverError):
        code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        code = status.HTTP_502_BAD_GATEWAY
    raise HTTPException(status_code=code, detail=str(error)) from error


@router.get("/mounts", response_model=List[MountRecord])
def list_mounts(
    mount_service: GcsMountService = Depends(get_mount_service),
) -> List[MountRecord]:
    """List active GCS mountpoints."""
    try:
        return mount_service.list_mountpoints().records
    except GcsMountError as e:
        _raise_http_error(e)


@router.post("/mounts", status_code=status.HTTP_204_NO_CONTENT)
def create_mount(
    request: MountRequest,
    mount_service: GcsMountService = Depends(get_mount_service),
) -> Response:
    """
    Mount a bucket.

    HTTP Status Codes:
        204: Driver launched
        400: Option not supported by the platform driver
        501: Unsupported host platform
        502: Driver failed to start or exited with an error
        503: Driver not installed
    """
    try:
        mount_service.mount(request)
    except GcsMountError as e:
        _raise_http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/mounts", status_code=status.HTTP_204_NO_CONTENT)
def delete_mount(
    mountpoint: str = Query(..., description="Mountpoint to unmount"),
    mount_service: GcsMountService = Depends(get_mount_service),
) -> Response:
    """Unmount a mountpoint."""
    try:
        mount_service.unmount(mountpoint)
    except GcsMountError as e:
        _raise_http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/platform")
def get_platform(
    mount_service: GcsMountService = Depends(get_mount_service),
) -> dict:
    """Platform and driver information."""
    try:
        return mount_service.get_platform_info()
    except GcsMountError as e:
        _raise_http_error(e)
