"""Shared data model primitives."""

from httpretriever.data_model.base import StrictArbitraryModel, StrictBaseModel


__all__ = ["StrictArbitraryModel", "StrictBaseModel"]
