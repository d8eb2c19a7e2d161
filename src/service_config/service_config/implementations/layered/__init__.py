# ABOUTME: Layered implementations package
# ABOUTME: Provides the file and environment backed configuration source

from .config_source import LayeredConfigSource, load_toml, CONFIG_ENV_VAR, CONFIG_ENV_OVERRIDE_PREFIX

__all__ = ["LayeredConfigSource", "load_toml", "CONFIG_ENV_VAR", "CONFIG_ENV_OVERRIDE_PREFIX"]
