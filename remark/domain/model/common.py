"""Shared base for domain models."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable domain record. Updates go through ``model_copy``."""

    model_config = ConfigDict(frozen=True)
