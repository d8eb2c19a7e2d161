# ABOUTME: Bootstrap settings for the configuration resolver
# ABOUTME: Reads the runtime environment and the locations of config files, manifest and keys

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from service_config.models.config import Environment


class BaseServiceSettings(BaseSettings):
    """Defines the bootstrap parameters the configuration resolver starts from.

    These are the only values read directly from the process environment; every
    other setting comes from the layered configuration source they point at.
    It leverages `pydantic-settings` to load them from ``SERVICE_``-prefixed
    environment variables or a `.env` file.

    Attributes:
        ENV: The runtime environment, classified by prefix into production,
            development or test. Read from ``SERVICE_ENV``.
        CONFIG_DIR: Directory holding ``default.toml``, ``<environment>.toml`` and ``local.toml``.
        MANIFEST_PATH: Package manifest supplying name, version and description.
        KEYS_DIR: Directory holding ``public_key.pem`` and ``private_key.pem``.
        model_config: Pydantic's configuration dictionary, specifying how settings are loaded.
    """

    ENV: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="The service's runtime environment. Drives the default values of every section.",
    )
    CONFIG_DIR: str = Field(
        default="config",
        description="Directory containing the layered TOML configuration files.",
    )
    MANIFEST_PATH: str = Field(
        default="pyproject.toml",
        description="Path of the package manifest with a [project] table.",
    )
    KEYS_DIR: str = Field(
        default="keys",
        description="Directory containing the service key pair.",
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("ENV", mode="before")
    @classmethod
    def validate_env_prefix(cls, v):
        """Classify ENV by prefix.

        Accepts any string and normalizes it:
        - prod, production, PROD-EU -> production
        - test, testing -> test
        - anything else, including empty -> development
        """
        if v is None or isinstance(v, str):
            return Environment.classify(v)
        return v
