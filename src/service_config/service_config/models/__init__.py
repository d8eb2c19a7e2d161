# ABOUTME: Models package initialization
# ABOUTME: Exports the configuration section models and related classes

# Configuration section models
from .config import (
    Environment,
    LogDestination,
    BrokerState,
    EnvironmentSection,
    PackageInfoSection,
    ApplicationSection,
    DatabaseSection,
    PrettyPrintOptions,
    LoggerSection,
    LoggingDisabled,
    LOGGING_DISABLED,
    ApiInfo,
    OpenApiDocument,
    SwaggerSection,
    BrokerAddresses,
    KafkaConsumerGroup,
    KafkaSection,
    KeyHandle,
    KeyPair,
    AuthSection,
)

__all__ = [
    "Environment",
    "LogDestination",
    "BrokerState",
    "EnvironmentSection",
    "PackageInfoSection",
    "ApplicationSection",
    "DatabaseSection",
    "PrettyPrintOptions",
    "LoggerSection",
    "LoggingDisabled",
    "LOGGING_DISABLED",
    "ApiInfo",
    "OpenApiDocument",
    "SwaggerSection",
    "BrokerAddresses",
    "KafkaConsumerGroup",
    "KafkaSection",
    "KeyHandle",
    "KeyPair",
    "AuthSection",
]
