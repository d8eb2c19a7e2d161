# ABOUTME: Memoizing configuration resolver exposing one read-only property per section
# ABOUTME: Sections are derived on first access, exactly once per key, and cached for the instance lifetime

import threading
from functools import lru_cache
from typing import Any, Callable, Dict, Optional, TypeVar

from service_config.config import derivations
from service_config.config.keys import KeyLoader
from service_config.config.logging import get_logger
from service_config.config.settings import ServiceSettings, get_settings
from service_config.interfaces.config import AbstractConfigSource
from service_config.models.config import (
    AnyLoggerSection,
    ApplicationSection,
    AuthSection,
    DatabaseSection,
    EnvironmentSection,
    KafkaSection,
    PackageInfoSection,
    SwaggerSection,
)

T = TypeVar("T")

SECTION_NAMES = (
    "environment",
    "package_info",
    "application",
    "database",
    "logger",
    "swagger",
    "auth",
    "kafka",
)


class SectionCache:
    """
    First-access-wins memo keyed by name.

    Each key has its own lock, so the derivation for a key runs at most once
    even when several threads ask for it simultaneously, while different keys
    resolve independently. A derivation that raises stores nothing: the key
    stays unresolved and the next access runs the derivation again.
    """

    def __init__(self):
        self._values: Dict[str, Any] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def __contains__(self, name: str) -> bool:
        return name in self._values

    def _lock_for(self, name: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = self._locks[name] = threading.Lock()
            return lock

    def get_or_resolve(self, name: str, derive: Callable[[], T]) -> T:
        try:
            return self._values[name]
        except KeyError:
            pass

        with self._lock_for(name):
            # Another thread may have finished while we waited
            try:
                return self._values[name]
            except KeyError:
                pass
            value = derive()
            self._values[name] = value
            return value


class ServiceConfig:
    """
    Lazily-evaluated, memoized configuration of a service.

    Every section is computed from the configuration source, sibling sections
    and the environment profile the first time it is read, then returned
    unchanged for the lifetime of the instance, even if files or environment
    variables change afterwards. Construct one instance at startup and pass it
    to the components that need it; ``get_service_config()`` provides a
    process-wide instance.

    Args:
        source: Configuration source to read values from. Defaults to a
            LayeredConfigSource loaded from ``settings.CONFIG_DIR`` on first use.
        settings: Bootstrap settings. Defaults to reading the environment on
            first access, not at construction.
        key_loader: Loader for the key pair. Defaults to ``settings.KEYS_DIR``,
            created on first access.

    Example:
        config = ServiceConfig()
        config.database.url
        public_key = await config.auth.public_key
    """

    def __init__(
        self,
        source: Optional[AbstractConfigSource] = None,
        settings: Optional[ServiceSettings] = None,
        key_loader: Optional[KeyLoader] = None,
    ):
        self._settings = settings
        self._key_loader = key_loader
        self._source = source
        self._cache = SectionCache()
        self._logger = get_logger(__name__)

    def _cached(self, name: str, derive: Callable[["ServiceConfig"], T]) -> T:
        def resolve() -> T:
            try:
                value = derive(self)
            except Exception as e:
                self._logger.error(f"Failed to resolve configuration section '{name}': {e}")
                raise
            self._logger.debug(f"Resolved configuration section '{name}'")
            return value

        return self._cache.get_or_resolve(name, resolve)

    def is_resolved(self, name: str) -> bool:
        """Whether the named section has been resolved and cached."""
        if name not in SECTION_NAMES:
            raise KeyError(f"unknown configuration section '{name}'")
        return name in self._cache

    @property
    def settings(self) -> ServiceSettings:
        if self._settings is not None:
            return self._settings
        return self._cached("settings", lambda config: ServiceSettings())

    @property
    def key_loader(self) -> KeyLoader:
        if self._key_loader is not None:
            return self._key_loader
        return self._cached("key_loader", lambda config: KeyLoader(config.settings.KEYS_DIR))

    @property
    def source(self) -> AbstractConfigSource:
        if self._source is not None:
            return self._source
        return self._cached("source", derivations.derive_source)

    @property
    def environment(self) -> EnvironmentSection:
        return self._cached("environment", derivations.derive_environment)

    @property
    def package_info(self) -> PackageInfoSection:
        return self._cached("package_info", derivations.derive_package_info)

    @property
    def application(self) -> ApplicationSection:
        return self._cached("application", derivations.derive_application)

    @property
    def database(self) -> DatabaseSection:
        return self._cached("database", derivations.derive_database)

    @property
    def logger(self) -> AnyLoggerSection:
        return self._cached("logger", derivations.derive_logger)

    @property
    def swagger(self) -> SwaggerSection:
        return self._cached("swagger", derivations.derive_swagger)

    @property
    def auth(self) -> AuthSection:
        return self._cached("auth", derivations.derive_auth)

    @property
    def kafka(self) -> KafkaSection:
        return self._cached("kafka", derivations.derive_kafka)


@lru_cache(maxsize=1)
def get_service_config() -> ServiceConfig:
    """Provides the process-wide configuration instance.

    Returns:
        A single, cached ServiceConfig built from ``get_settings()``.
    """
    return ServiceConfig(settings=get_settings())
