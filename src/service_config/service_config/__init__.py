# ABOUTME: Package initialization for the service configuration facade
# ABOUTME: Re-exports the resolver and its process-wide accessor

"""
Service configuration package.

Exposes a lazily-evaluated, memoized configuration object whose sections
(environment, package info, application, database, logger, API documentation,
auth keys, kafka) are derived on first access from layered TOML files,
environment variables and per-environment defaults.
"""

from service_config.config import ServiceConfig, get_service_config

__version__ = "0.1.0"

__all__ = ["ServiceConfig", "get_service_config", "__version__"]
