# ABOUTME: Exceptions package exports
# ABOUTME: Exports the configuration error hierarchy

from service_config.exceptions.base import (
    ServiceConfigException,
    ConfigurationException,
    MissingRequiredKeyError,
    ManifestNotFoundError,
    MissingManifestNameError,
    MissingPublicKeyError,
    ConfigSourceError,
)

__all__ = [
    "ServiceConfigException",
    "ConfigurationException",
    "MissingRequiredKeyError",
    "ManifestNotFoundError",
    "MissingManifestNameError",
    "MissingPublicKeyError",
    "ConfigSourceError",
]
