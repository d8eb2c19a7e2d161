# ABOUTME: EnvironmentSection model describing the classified runtime mode
# ABOUTME: Exposes the canonical label and one convenience flag per environment

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .enum import Environment


class EnvironmentSection(BaseModel):
    """
    Classified runtime environment.

    Exactly one of ``is_production``, ``is_development`` and ``is_test`` is
    true; all three are computed from ``environment`` so they cannot disagree.
    """

    environment: Environment = Field(description="Canonical environment label")

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def is_production(self) -> bool:
        return self.environment is Environment.PRODUCTION

    @computed_field
    @property
    def is_development(self) -> bool:
        return self.environment is Environment.DEVELOPMENT

    @computed_field
    @property
    def is_test(self) -> bool:
        return self.environment is Environment.TEST
