# ABOUTME: Configuration package initialization
# ABOUTME: Exports the resolver, bootstrap settings and logging helpers

from service_config.config.settings import ServiceSettings, get_settings
from service_config.config.resolver import ServiceConfig, SectionCache, SECTION_NAMES, get_service_config
from service_config.config.profiles import EnvironmentProfile, ENVIRONMENT_PROFILES, get_profile
from service_config.config.keys import KeyLoader
from service_config.config.logging import (
    ConsoleSink,
    FileSink,
    setup_logging,
    get_logger,
)

__all__ = [
    "ServiceSettings",
    "get_settings",
    "ServiceConfig",
    "SectionCache",
    "SECTION_NAMES",
    "get_service_config",
    "EnvironmentProfile",
    "ENVIRONMENT_PROFILES",
    "get_profile",
    "KeyLoader",
    "ConsoleSink",
    "FileSink",
    "setup_logging",
    "get_logger",
]
