# ABOUTME: PackageInfoSection model holding the service's own manifest identity
# ABOUTME: Name is required; version and description carry defaults

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_VERSION = "1.0.0"


class PackageInfoSection(BaseModel):
    """
    Identity read from the package manifest.
    """

    name: str = Field(min_length=1, description="Distribution name")
    version: str = Field(default=DEFAULT_VERSION, description="Distribution version")
    description: str = Field(default="", description="One-line summary; defaults to '<name> service'")

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def default_description(cls, data):
        if isinstance(data, dict) and not data.get("description") and data.get("name"):
            data = {**data, "description": f"{data['name']} service"}
        return data
