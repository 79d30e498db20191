from functools import lru_cache
from typing import Any, Dict

from .config import Settings
from .services.mount import GcsMountService

# Global singleton instances
_singletons: Dict[str, Any] = {}


@lru_cache
def get_settings() -> Settings:
    """Settings singleton instance."""
    return Settings()


def get_mount_service() -> GcsMountService:
    if "mount_service" not in _singletons:
        _singletons["mount_service"] = GcsMountService(settings=get_settings())
    return _singletons["mount_service"]


def reset_singletons() -> None:
    """Reset cached instances (used by tests)."""
    _singletons.clear()
    get_settings.cache_clear()
