# ABOUTME: Environment profile table with per-environment default values
# ABOUTME: Maps production, development and test to database, logger and broker defaults

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict

from service_config.models.config import BrokerAddresses, Environment, LogDestination, LogLevel

LOCAL_DATABASE_HOST = "postgres_container"
LOCAL_DATABASE_USER = "postgres"
LOCAL_DATABASE_PASSWORD = "postgres"
DEFAULT_DATABASE_PORT = 5432
LOCAL_KAFKA_BROKER = "kafka_container:9092"
DEFAULT_LOG_DESTINATION = ".logs"


class DatabaseDefaults(BaseModel):
    """Defaults applied when the config source has no ``database.*`` value.

    A ``None`` field has no default and must come from the source.
    """

    host: Optional[str] = None
    port: int = DEFAULT_DATABASE_PORT
    user: Optional[str] = None
    password: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class LoggerProfile(BaseModel):
    """How the logger section resolves. ``enabled=False`` yields the disabled sentinel."""

    enabled: bool = True
    destination: LogDestination = LogDestination.CONSOLE
    pretty_print: bool = False
    level: LogLevel = "INFO"

    model_config = ConfigDict(frozen=True)


class EnvironmentProfile(BaseModel):
    database: DatabaseDefaults
    logger: LoggerProfile
    brokers: BrokerAddresses

    model_config = ConfigDict(frozen=True)


_LOCAL_DATABASE = DatabaseDefaults(
    host=LOCAL_DATABASE_HOST,
    user=LOCAL_DATABASE_USER,
    password=LOCAL_DATABASE_PASSWORD,
)

ENVIRONMENT_PROFILES: Dict[Environment, EnvironmentProfile] = {
    Environment.DEVELOPMENT: EnvironmentProfile(
        database=_LOCAL_DATABASE,
        logger=LoggerProfile(destination=LogDestination.CONSOLE, pretty_print=True, level="DEBUG"),
        brokers=BrokerAddresses.of([LOCAL_KAFKA_BROKER]),
    ),
    Environment.TEST: EnvironmentProfile(
        database=_LOCAL_DATABASE,
        logger=LoggerProfile(enabled=False),
        brokers=BrokerAddresses.of([]),
    ),
    Environment.PRODUCTION: EnvironmentProfile(
        database=DatabaseDefaults(),
        logger=LoggerProfile(destination=LogDestination.FILE, pretty_print=False, level="INFO"),
        brokers=BrokerAddresses.unset(),
    ),
}


def get_profile(environment: Environment) -> EnvironmentProfile:
    """Return the default-value profile of an environment."""
    return ENVIRONMENT_PROFILES[environment]
