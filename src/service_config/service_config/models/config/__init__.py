# ABOUTME: Configuration section models
# ABOUTME: Exports the immutable value objects produced by the configuration resolver

from .enum import Environment, LogDestination, BrokerState
from .environment import EnvironmentSection
from .package_info import PackageInfoSection
from .application import ApplicationSection
from .database import DatabaseSection
from .logger import (
    LogLevel,
    PrettyPrintOptions,
    LoggerSection,
    LoggingDisabled,
    LOGGING_DISABLED,
    AnyLoggerSection,
)
from .swagger import ApiInfo, OpenApiDocument, SwaggerSection
from .kafka import BrokerAddresses, KafkaConsumerGroup, KafkaSection
from .auth import KeyHandle, KeyPair, AuthSection

__all__ = [
    "Environment",
    "LogDestination",
    "BrokerState",
    "EnvironmentSection",
    "PackageInfoSection",
    "ApplicationSection",
    "DatabaseSection",
    "LogLevel",
    "PrettyPrintOptions",
    "LoggerSection",
    "LoggingDisabled",
    "LOGGING_DISABLED",
    "AnyLoggerSection",
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
