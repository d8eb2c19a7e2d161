# ABOUTME: DatabaseSection model with PostgreSQL connection parameters
# ABOUTME: Renders a connection URL from the resolved parameters

from typing import Optional
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field


class DatabaseSection(BaseModel):
    """
    Connection parameters for the service database.
    """

    database: str = Field(min_length=1, description="Database name, defaults to the application name")
    host: str = Field(description="Database host")
    port: int = Field(default=5432, ge=0, le=65535, description="Database port")
    user: str = Field(description="Database user")
    password: str = Field(repr=False, description="Database password")
    migrations_directory: Optional[str] = Field(default=None, description="Directory holding migration scripts")

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    @property
    def url(self) -> str:
        """PostgreSQL connection URL with credentials quoted."""
        return (
            f"postgresql://{quote(self.user, safe='')}:{quote(self.password, safe='')}"
            f"@{self.host}:{self.port}/{quote(self.database, safe='')}"
        )
