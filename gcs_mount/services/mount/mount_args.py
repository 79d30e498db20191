"""Driver argument assembly for GCSDokan and gcsfuse."""

from typing import List

from ...core.exceptions import UnsupportedModeError
from ...models import (
    DEFAULT_IMPLICIT_DIRS,
    DEFAULT_REFRESH_SECONDS,
    CacheType,
    MountMode,
    MountRequest,
)

# (dir mode, file mode) per mount mode
GCSFUSE_PERMISSIONS = {
    MountMode.READ_ONLY: ("555", "444"),
    MountMode.READ_WRITE: ("755", "644"),
}


def _refresh(request: MountRequest) -> int:
    return DEFAULT_REFRESH_SECONDS if request.refresh is None else request.refresh


def build_dokan_args(request: MountRequest) -> List[str]:
    """
    Build GCSDokan arguments: ``<remote> <mountpoint> [flags]``.

    Memory caching is used when no cache type is requested.

    Raises:
        UnsupportedModeError: write mode was requested
    """
    if request.mode != MountMode.READ_ONLY:
        raise UnsupportedModeError("File writing is not supported on Windows")

    args = [request.remote, request.mountpoint]

    if request.key_file:
        args += ["--key", request.key_file]

    cache_type = request.cache_type or CacheType.MEMORY
    if cache_type == CacheType.DISK:
        args.append("--diskCache")
    elif cache_type == CacheType.MEMORY:
        args.append("--memoryCache")
    else:
        args.append("--noCache")
    if cache_type != CacheType.NONE and request.cache_arg:
        args.append(request.cache_arg)

    if request.billing:
        args += ["--billing", request.billing]

    args += ["--refresh", str(_refresh(request))]
    args += request.additional_args
    return args


def build_gcsfuse_args(request: MountRequest) -> List[str]:
    """
    Build gcsfuse arguments: ``[flags] <bucket> <mountpoint>``.

    A path after the bucket name restricts the mount with ``--only-dir``.

    Raises:
        UnsupportedModeError: a cache other than disk was requested
    """
    cache_type = request.cache_type or CacheType.DISK
    if cache_type != CacheType.DISK:
        raise UnsupportedModeError(
            f"gcsfuse only supports disk cache, got '{cache_type.value}'"
        )

    args = []
    implicit_dirs = DEFAULT_IMPLICIT_DIRS if request.implicit_dirs is None else request.implicit_dirs
    if implicit_dirs:
        args.append("--implicit-dirs")

    if request.key_file:
        args += ["--key-file", request.key_file]

    if request.cache_arg:
        args += ["--temp-dir", request.cache_arg]

    if request.billing:
        args += ["--billing-project", request.billing]

    # Same refresh interval for stat and type caches
    refresh = _refresh(request)
    args += ["--stat-cache-ttl", f"{refresh}s"]
    args += ["--type-cache-ttl", f"{refresh}s"]

    args += request.additional_args

    dir_mode, file_mode = GCSFUSE_PERMISSIONS[request.mode]
    args += ["--dir-mode", dir_mode, "--file-mode", file_mode]

    if request.path_in_bucket:
        args += ["--only-dir", request.path_in_bucket]

    args += [request.bucket, request.mountpoint]
    return args
