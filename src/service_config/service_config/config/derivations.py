# ABOUTME: Derivation functions producing each configuration section
# ABOUTME: Each reads the config source, sibling sections and the environment profile table

import tomllib
import uuid
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

from service_config.config.keys import KeyLoader
from service_config.config.logging import ConsoleSink, FileSink
from service_config.config.profiles import DEFAULT_LOG_DESTINATION, get_profile
from service_config.exceptions import (
    ConfigSourceError,
    ConfigurationException,
    ManifestNotFoundError,
    MissingManifestNameError,
)
from service_config.implementations.layered import LayeredConfigSource
from service_config.models.config import (
    ApiInfo,
    ApplicationSection,
    AuthSection,
    BrokerAddresses,
    DatabaseSection,
    EnvironmentSection,
    KafkaConsumerGroup,
    KafkaSection,
    LogDestination,
    LOGGING_DISABLED,
    AnyLoggerSection,
    LoggerSection,
    OpenApiDocument,
    PackageInfoSection,
    PrettyPrintOptions,
    SwaggerSection,
)
from service_config.models.config.application import DEFAULT_MEDIA_TYPES

if TYPE_CHECKING:
    from service_config.config.resolver import ServiceConfig

# Identifies this process among replicas; generated once per interpreter
PROCESS_INSTANCE_ID = str(uuid.uuid4())


def derive_source(config: "ServiceConfig") -> LayeredConfigSource:
    return LayeredConfigSource.load(config.settings.CONFIG_DIR, config.environment.environment.value)


def derive_environment(config: "ServiceConfig") -> EnvironmentSection:
    return EnvironmentSection(environment=config.settings.ENV)


def derive_package_info(config: "ServiceConfig") -> PackageInfoSection:
    """Read name, version and description from the package manifest.

    The ``[project]`` table is used, falling back to ``[tool.poetry]``.
    """
    path = Path(config.settings.MANIFEST_PATH)
    try:
        with path.open("rb") as f:
            manifest = tomllib.load(f)
    except OSError as e:
        raise ManifestNotFoundError(str(path), e.strerror) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigSourceError(str(path), str(e)) from e

    project = manifest.get("project") or manifest.get("tool", {}).get("poetry") or {}
    name = project.get("name")
    if not isinstance(name, str) or not name.strip():
        raise MissingManifestNameError(str(path))

    info = {"name": name.strip()}
    for field in ("version", "description"):
        if project.get(field):
            info[field] = project[field]
    return PackageInfoSection(**info)


def derive_application(config: "ServiceConfig") -> ApplicationSection:
    """Explicit ``application.*`` values win; identity falls back to the manifest."""
    source = config.source
    identity = {}
    for field in ("name", "version", "description"):
        value = source.optional(f"application.{field}")
        identity[field] = value if value is not None else getattr(config.package_info, field)

    return ApplicationSection(
        **identity,
        host=source.value("application.host", "0.0.0.0"),
        port=source.value("application.port", 8080),
        instance_id=source.value("application.instance_id", PROCESS_INSTANCE_ID),
        consumes=source.value("application.consumes", list(DEFAULT_MEDIA_TYPES)),
        produces=source.value("application.produces", list(DEFAULT_MEDIA_TYPES)),
    )


def derive_database(config: "ServiceConfig") -> DatabaseSection:
    source = config.source
    defaults = get_profile(config.environment.environment).database
    database = source.optional("database.database")

    return DatabaseSection(
        database=database if database is not None else config.application.name,
        host=source.value("database.host", defaults.host),
        port=source.value("database.port", defaults.port),
        user=source.value("database.user", defaults.user),
        password=source.value("database.password", defaults.password),
        migrations_directory=source.optional("database.migrations_directory"),
    )


def _pretty_print_options(value: Any) -> Optional[PrettyPrintOptions]:
    # Environment overrides arrive as strings
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        value = value.strip().lower() == "true"
    if value is True:
        return PrettyPrintOptions()
    if value is False or value is None:
        return None
    if isinstance(value, Mapping):
        return PrettyPrintOptions(**value)
    raise ConfigurationException(
        f'service config property "logger.pretty_print" must be a boolean or a table, got {value!r}',
        code="INVALID_VALUE",
        details={"key": "logger.pretty_print"},
    )


def derive_logger(config: "ServiceConfig") -> AnyLoggerSection:
    """Test disables logging; development logs to the console, production to a file.

    The descriptor is validated before the sink is acquired; a rejected value
    opens no file.
    """
    profile = get_profile(config.environment.environment).logger
    if not profile.enabled:
        return LOGGING_DISABLED

    source = config.source
    pretty_print = _pretty_print_options(source.optional("logger.pretty_print", profile.pretty_print))
    level = source.value("logger.level", profile.level)

    path = None
    if profile.destination is LogDestination.FILE:
        path = Path(source.value("logger.destination", DEFAULT_LOG_DESTINATION)).resolve()

    section = LoggerSection(
        destination=profile.destination,
        path=path,
        pretty_print=pretty_print,
        level=level,
        sink=None,
    )
    sink = FileSink(path) if path is not None else ConsoleSink()
    return section.model_copy(update={"sink": sink})


def derive_swagger(config: "ServiceConfig") -> SwaggerSection:
    source = config.source
    application = config.application

    return SwaggerSection(
        route_prefix=source.value("documentation.route_prefix", "/documentation"),
        expose_route=source.value("documentation.expose_route", True),
        openapi=OpenApiDocument(
            openapi=source.value("documentation.openapi_version", "3.0.3"),
            info=ApiInfo(
                title=f"{application.name} API",
                description=application.description,
                version=application.version,
            ),
            host=source.optional("documentation.host"),
        ),
    )


def consumer_group_id(config: "ServiceConfig") -> str:
    group_id = config.source.optional("kafka.group_id")
    if group_id is not None:
        return group_id
    application = config.application
    return f"{application.name}_{application.instance_id}"


def derive_auth(config: "ServiceConfig") -> AuthSection:
    """Start both key reads; their outcome is observed through the handles."""
    group = KafkaConsumerGroup(group_id=consumer_group_id(config))
    loader: KeyLoader = config.key_loader

    return AuthSection(
        public_key=loader.load_public_key(),
        private_key=loader.load_private_key(),
        kafka=group,
    )


def _broker_addresses(value: Any) -> BrokerAddresses:
    if isinstance(value, str):
        return BrokerAddresses.of(part.strip() for part in value.split(",") if part.strip())
    if isinstance(value, (list, tuple)):
        return BrokerAddresses.of(str(item) for item in value)
    raise ConfigurationException(
        f'service config property "kafka.brokers" must be a list or a comma-separated string, got {value!r}',
        code="INVALID_VALUE",
        details={"key": "kafka.brokers"},
    )


def derive_kafka(config: "ServiceConfig") -> KafkaSection:
    source = config.source
    if source.has("kafka.brokers"):
        brokers = _broker_addresses(source.get("kafka.brokers"))
    else:
        brokers = get_profile(config.environment.environment).brokers

    return KafkaSection(
        client_id=config.application.name,
        group_id=consumer_group_id(config),
        brokers=brokers,
    )
