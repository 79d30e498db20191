"""
Module-level mount operations.

    >>> from gcs_mount import mount, list_mountpoints, unmount
    >>> mount("gs://genomics-public-data/clinvar", "/tmp/clinvar")
    >>> list_mountpoints().to_rows()
    [('genomics-public-data', '/tmp/clinvar')]
    >>> unmount("/tmp/clinvar")

Credentials are read by the driver itself, from ``key_file`` or the
``GOOGLE_APPLICATION_CREDENTIALS`` environment variable.
"""

from typing import Optional, Sequence, Union

from .dependencies import get_mount_service
from .models import CacheType, MountMode, MountTable


def mount(
    remote: str,
    mountpoint: str,
    mode: Union[MountMode, str] = MountMode.READ_ONLY,
    cache_type: Optional[Union[CacheType, str]] = None,
    cache_arg: Optional[str] = None,
    billing: Optional[str] = None,
    refresh: Optional[int] = None,
    implicit_dirs: Optional[bool] = None,
    key_file: Optional[str] = None,
    additional_args: Optional[Sequence[str]] = None,
) -> None:
    """
    Mount a GCS bucket, or a directory inside it, at ``mountpoint``.

    Args:
        remote: ``bucket`` or ``bucket/path``, with or without ``gs://``
        mountpoint: local directory, created if missing
        mode: ``"r"`` or ``"rw"``; write access is only available with gcsfuse
        cache_type: ``"disk"``, ``"memory"`` or ``"none"``; gcsfuse only
            supports ``"disk"``. Defaults to memory on Windows, disk elsewhere
        cache_arg: memory limit in MB, or the cache directory for disk cache
        billing: billing project ID
        refresh: metadata refresh interval in seconds (configured default 60)
        implicit_dirs: infer directories from object names (gcsfuse only)
        key_file: service account credentials file
        additional_args: extra arguments passed verbatim to the driver
    """
    service = get_mount_service()
    request = service.config.build_request(
        remote,
        mountpoint,
        mode=MountMode(mode),
        cache_type=CacheType(cache_type) if cache_type is not None else None,
        cache_arg=cache_arg,
        billing=billing,
        refresh=refresh,
        implicit_dirs=implicit_dirs,
        key_file=key_file,
        additional_args=additional_args,
    )
    service.mount(request)


def list_mountpoints() -> MountTable:
    """
    List active GCS mountpoints.

    gcsfuse listings only show the bucket name; GCSDokan reports the full
    remote path.
    """
    return get_mount_service().list_mountpoints()


def unmount(mountpoint: str) -> None:
    """Unmount a GCS mountpoint."""
    get_mount_service().unmount(mountpoint)
