# ABOUTME: SwaggerSection model for the API documentation route and OpenAPI document
# ABOUTME: Document info is derived entirely from the application section

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ApiInfo(BaseModel):
    title: str
    description: Optional[str] = None
    version: str

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)


class OpenApiDocument(BaseModel):
    openapi: str = Field(default="3.0.3", description="OpenAPI specification version tag")
    info: ApiInfo
    host: Optional[str] = Field(default=None, description="Public host the API is served from")

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)


class SwaggerSection(BaseModel):
    """
    API documentation settings.
    """

    route_prefix: str = Field(default="/documentation", description="Route the documentation UI is mounted on")
    expose_route: bool = Field(default=True, description="Whether the documentation route is registered")
    openapi: OpenApiDocument

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)
