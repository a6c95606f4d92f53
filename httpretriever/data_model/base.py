"""Shared Pydantic base models."""

from pydantic import BaseModel, ConfigDict


class StrictBaseModel(BaseModel):
    """Base model with strict, immutable defaults."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class StrictArbitraryModel(BaseModel):
    """Immutable base model that may hold non-pydantic field types."""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)
