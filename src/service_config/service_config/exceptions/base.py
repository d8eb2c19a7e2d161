# ABOUTME: Exception classes raised while resolving service configuration
# ABOUTME: Provides structured error handling with error codes and the offending key or file

from typing import Dict, Any


class ServiceConfigException(Exception):
    """Base exception class for the service configuration package.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the package inherit from this class so
    callers can catch every configuration failure with a single clause.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize ServiceConfigException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ConfigurationException(ServiceConfigException):
    """Exception raised for configuration errors.

    Used when a configuration section cannot be resolved, such as:
    - Missing required configuration values
    - Missing or malformed package manifest
    - Missing key material
    - Unreadable configuration files

    Should include details about the configuration key or file involved.
    """

    pass


class MissingRequiredKeyError(ConfigurationException):
    """Raised when a configuration path has no value and no default."""

    def __init__(self, key: str):
        super().__init__(
            f'service config is missing required property "{key}"',
            code="MISSING_REQUIRED_KEY",
            details={"key": key},
        )
        self.key = key


class ManifestNotFoundError(ConfigurationException):
    """Raised when the package manifest cannot be read."""

    def __init__(self, path: str, reason: str | None = None):
        message = f"package manifest not found: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, code="MANIFEST_NOT_FOUND", details={"path": path})
        self.path = path


class MissingManifestNameError(ConfigurationException):
    """Raised when the package manifest does not declare a name."""

    def __init__(self, path: str):
        super().__init__(
            f'package manifest {path} is missing required field "name"',
            code="MISSING_MANIFEST_NAME",
            details={"path": path},
        )
        self.path = path


class MissingPublicKeyError(ConfigurationException):
    """Raised when the public key file cannot be read.

    The private key has no counterpart: its absence resolves to ``None``.
    """

    def __init__(self, path: str):
        super().__init__(f"missing public key: {path}", code="MISSING_PUBLIC_KEY", details={"path": path})
        self.path = path


class ConfigSourceError(ConfigurationException):
    """Raised when a layer of the configuration source cannot be parsed."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            f"invalid configuration source {source}: {reason}",
            code="INVALID_CONFIG_SOURCE",
            details={"source": source},
        )
        self.source = source
