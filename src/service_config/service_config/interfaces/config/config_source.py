# ABOUTME: Abstract configuration source interface for hierarchical key-value lookups
# ABOUTME: Defines the has/get contract on dot-separated paths plus required/default helpers

from abc import abstractmethod, ABC
from typing import Any, TypeVar

from service_config.exceptions import MissingRequiredKeyError

T = TypeVar("T")

_MISSING: Any = object()


class AbstractConfigSource(ABC):
    """
    Abstract base class for hierarchical configuration sources.

    A configuration source is a read-only lookup addressed by dot-separated
    paths such as ``database.host`` or ``logger.destination``. Concrete
    implementations decide where the values come from (files, environment
    variables, in-memory mappings); section derivations only rely on
    ``has`` and ``get``.

    The concrete helpers ``value`` and ``optional`` implement the lookup
    precedence shared by every section: an explicit value from the source,
    then the caller's default, then a ``MissingRequiredKeyError``.
    """

    @abstractmethod
    def has(self, key: str) -> bool:
        """
        Check whether a value exists at the given path.

        Args:
            key: Dot-separated configuration path.

        Returns:
            bool: True if the source holds a value (including ``None``-free
            empty containers) at ``key``.
        """
        pass

    @abstractmethod
    def get(self, key: str) -> Any:
        """
        Return the value stored at the given path.

        Args:
            key: Dot-separated configuration path.

        Returns:
            Any: The stored value. Nested tables are returned as plain dicts.

        Raises:
            MissingRequiredKeyError: If no value exists at ``key``.
        """
        pass

    def value(self, key: str, default: T = _MISSING) -> T:
        """Return the value at ``key``, falling back to ``default``.

        Raises:
            MissingRequiredKeyError: If the key is absent and no default was given.
        """
        if self.has(key):
            return self.get(key)
        if default is _MISSING or default is None:
            raise MissingRequiredKeyError(key)
        return default

    def optional(self, key: str, default: T | None = None) -> T | None:
        """Return the value at ``key`` or ``default`` (``None`` allowed)."""
        if self.has(key):
            return self.get(key)
        return default
