# ABOUTME: In-memory implementation of AbstractConfigSource backed by a nested dictionary
# ABOUTME: Provides dot-path lookups for tests and programmatic configuration

import copy
from typing import Any, Dict, Mapping, Optional

from service_config.interfaces.config import AbstractConfigSource
from service_config.exceptions import MissingRequiredKeyError


def deep_merge(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence.

    For nested dictionaries, values are merged recursively.
    For other values (lists included), override replaces base.
    """
    result = dict(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, Mapping):
            result[key] = deep_merge(result[key], value)
        elif isinstance(value, Mapping):
            result[key] = deep_merge({}, value)
        else:
            result[key] = value

    return result


def expand_dotted_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Turn ``{"database.host": "db"}`` into ``{"database": {"host": "db"}}``.

    Nested mappings are expanded recursively; plain keys are left untouched.
    """
    result: Dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, Mapping):
            value = expand_dotted_keys(value)
        parts = key.split(".")
        for part in reversed(parts[1:]):
            value = {part: value}
        result = deep_merge(result, {parts[0]: value})
    return result


class InMemoryConfigSource(AbstractConfigSource):
    """
    In-memory implementation of AbstractConfigSource.

    Values are held in a nested dictionary and addressed by dot-separated
    paths. Keys given to the constructor may themselves be dotted, which is
    convenient in tests::

        source = InMemoryConfigSource({"database.host": "db", "kafka": {"brokers": []}})
        source.get("database.host")  # "db"

    The mapping is copied on construction; later changes to the caller's
    dictionary are not observed.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(expand_dotted_keys(data or {}))

    def _lookup(self, key: str) -> tuple[bool, Any]:
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return False, None
            node = node[part]
        return node is not None, node

    def has(self, key: str) -> bool:
        found, _ = self._lookup(key)
        return found

    def get(self, key: str) -> Any:
        found, value = self._lookup(key)
        if not found:
            raise MissingRequiredKeyError(key)
        return copy.deepcopy(value)

    def as_dict(self) -> Dict[str, Any]:
        """Return a copy of the whole configuration tree."""
        return copy.deepcopy(self._data)
