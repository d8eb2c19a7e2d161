# ABOUTME: Layered configuration source merging TOML files and environment variables
# ABOUTME: Loads default, per-environment and local files, then applies SERVICE_CONFIG overrides

import json
import os
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from loguru import logger

from service_config.exceptions import ConfigSourceError
from service_config.implementations.memory.config import InMemoryConfigSource, deep_merge, expand_dotted_keys

CONFIG_ENV_VAR = "SERVICE_CONFIG"
CONFIG_ENV_OVERRIDE_PREFIX = "SERVICE_CONFIG__"


def load_toml(file_path: Path) -> Dict[str, Any]:
    """Load a TOML file and return its contents as a dictionary.

    Raises:
        ConfigSourceError: If the file cannot be read or is not valid TOML.
    """
    try:
        with file_path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigSourceError(str(file_path), str(e)) from e
    except OSError as e:
        raise ConfigSourceError(str(file_path), e.strerror or str(e)) from e


def _decode_env_value(raw: str) -> Any:
    # Lists and tables may be passed as JSON; scalars stay strings for the section models to coerce
    try:
        decoded = json.loads(raw)
    except ValueError:
        return raw
    return decoded if isinstance(decoded, (list, dict)) else raw


class LayeredConfigSource(InMemoryConfigSource):
    """
    Configuration source assembled from several layers, lowest priority first:

    1. ``<config_dir>/default.toml``
    2. ``<config_dir>/<environment>.toml``
    3. ``<config_dir>/local.toml``
    4. the ``SERVICE_CONFIG`` environment variable, a JSON object
    5. ``SERVICE_CONFIG__<SECTION>__<KEY>`` environment variables, one value each

    Missing files are skipped. Later layers are deep-merged over earlier ones,
    so a file only needs to contain the keys it changes. Path segments taken
    from environment variable names are lowercased.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None, layers: Optional[List[str]] = None):
        super().__init__(data)
        self.layers = list(layers or [])

    @classmethod
    def load(
        cls,
        config_dir: Union[str, Path],
        environment: str,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "LayeredConfigSource":
        """Read every layer and return the merged source.

        Args:
            config_dir: Directory holding the TOML files.
            environment: Canonical environment label selecting ``<environment>.toml``.
            environ: Environment mapping to read overrides from. Defaults to ``os.environ``.

        Raises:
            ConfigSourceError: If a present layer cannot be parsed.
        """
        environ = os.environ if environ is None else environ
        config_dir = Path(config_dir)
        merged: Dict[str, Any] = {}
        layers: List[str] = []

        for file_name in ("default.toml", f"{environment}.toml", "local.toml"):
            file_path = config_dir / file_name
            if file_path.is_file():
                merged = deep_merge(merged, load_toml(file_path))
                layers.append(str(file_path))

        raw_json = environ.get(CONFIG_ENV_VAR)
        if raw_json:
            try:
                overrides = json.loads(raw_json)
            except ValueError as e:
                raise ConfigSourceError(CONFIG_ENV_VAR, str(e)) from e
            if not isinstance(overrides, dict):
                raise ConfigSourceError(CONFIG_ENV_VAR, "expected a JSON object")
            merged = deep_merge(merged, expand_dotted_keys(overrides))
            layers.append(CONFIG_ENV_VAR)

        for name in sorted(environ):
            if not name.upper().startswith(CONFIG_ENV_OVERRIDE_PREFIX):
                continue
            path = name[len(CONFIG_ENV_OVERRIDE_PREFIX) :].lower().replace("__", ".")
            if not path:
                continue
            merged = deep_merge(merged, expand_dotted_keys({path: _decode_env_value(environ[name])}))
            layers.append(name)

        logger.debug(f"Loaded configuration layers for '{environment}': {layers or 'none'}")
        return cls(merged, layers)
