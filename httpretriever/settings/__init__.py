"""Environment settings loading."""

from .app import RetrieverSettings, get_settings


__all__ = ["RetrieverSettings", "get_settings"]
