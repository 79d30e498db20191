"""Mount Configuration Handler - request defaults from Settings."""

from typing import Optional, Sequence

from ...config import Settings
from ...models import CacheType, MountMode, MountRequest


class MountConfigHandler:
    """Builds mount requests, filling unset options from configured defaults."""

    def __init__(self, settings: Settings):
        self._settings = settings

    def build_request(
        self,
        remote: str,
        mountpoint: str,
        mode: MountMode = MountMode.READ_ONLY,
        cache_type: Optional[CacheType] = None,
        cache_arg: Optional[str] = None,
        billing: Optional[str] = None,
        refresh: Optional[int] = None,
        implicit_dirs: Optional[bool] = None,
        key_file: Optional[str] = None,
        additional_args: Optional[Sequence[str]] = None,
    ) -> MountRequest:
        """Build a request; options left as None take configured defaults at mount time."""
        return MountRequest(
            remote=remote,
            mountpoint=mountpoint,
            mode=mode,
            cache_type=cache_type,
            cache_arg=cache_arg,
            billing=billing,
            refresh=refresh,
            implicit_dirs=implicit_dirs,
            key_file=key_file,
            additional_args=list(additional_args or []),
        )

    def apply_defaults(self, request: MountRequest) -> MountRequest:
        """Fill refresh and implicit_dirs from Settings where the request leaves them unset."""
        updates = {}
        if request.refresh is None:
            updates["refresh"] = self._settings.default_refresh_seconds
        if request.implicit_dirs is None:
            updates["implicit_dirs"] = self._settings.default_implicit_dirs
        return request.model_copy(update=updates) if updates else request

    def get_platform_config(self) -> dict:
        """Get driver and default configuration."""
        return {
            "windows_driver": self._settings.windows_driver,
            "posix_driver": self._settings.posix_driver,
            "default_refresh_seconds": self._settings.default_refresh_seconds,
            "default_implicit_dirs": self._settings.default_implicit_dirs,
            "raise_on_missing_driver": self._settings.raise_on_missing_driver,
        }
