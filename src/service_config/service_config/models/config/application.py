# ABOUTME: ApplicationSection model with service identity and network bind settings
# ABOUTME: Carries the process instance identifier and accepted/produced media types

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MEDIA_TYPES: Tuple[str, ...] = ("application/json",)


class ApplicationSection(BaseModel):
    """
    Identity and bind address of the running service.
    """

    name: str = Field(min_length=1, description="Service name")
    version: str = Field(description="Service version")
    description: str = Field(description="Service description")
    host: str = Field(default="0.0.0.0", description="Interface to bind to")
    port: int = Field(default=8080, ge=0, le=65535, description="Port to bind to")
    instance_id: str = Field(description="Random identifier, stable for the process lifetime")
    consumes: Tuple[str, ...] = Field(default=DEFAULT_MEDIA_TYPES, description="Accepted media types")
    produces: Tuple[str, ...] = Field(default=DEFAULT_MEDIA_TYPES, description="Produced media types")

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)
