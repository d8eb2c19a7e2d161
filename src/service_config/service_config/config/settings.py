# ABOUTME: Settings composition and process-wide singleton accessor
# ABOUTME: Assembles bootstrap settings into a single object cached for the process

from functools import lru_cache

from ._base import BaseServiceSettings


class ServiceSettings(BaseServiceSettings):
    """Represents the complete bootstrap configuration of the service.

    This class is the aggregation point for bootstrap settings. Services that
    need additional environment-only switches extend it through inheritance,
    keeping a single settings object per process.

    The `get_settings` function provides a singleton instance of this class.
    """

    pass


@lru_cache
def get_settings() -> ServiceSettings:
    """Provides a singleton instance of the bootstrap settings.

    The instance is created on first call and reused afterwards, so the
    environment is read once per process. Call ``get_settings.cache_clear()``
    in tests that change the environment.

    Returns:
        A single, cached instance of the ServiceSettings class.
    """
    return ServiceSettings()
