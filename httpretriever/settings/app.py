"""Retriever settings powered by Pydantic BaseSettings."""

import logging
import os
import sys
from typing import TextIO

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from httpretriever.observability.logging import configure_logging
from httpretriever.retriever.config import RetrieverConfig
from httpretriever.retriever.constants import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_READ_TIMEOUT_SECONDS,
)


class RetrieverSettings(BaseSettings):
    """Environment configuration, read from HTTPRETRIEVER_* variables."""

    model_config = SettingsConfigDict(
        env_prefix="HTTPRETRIEVER_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    connect_timeout_seconds: float = Field(default=DEFAULT_CONNECT_TIMEOUT_SECONDS, gt=0)
    read_timeout_seconds: float = Field(default=DEFAULT_READ_TIMEOUT_SECONDS, gt=0)
    follow_redirects: bool = True
    body_line_terminator: str = os.linesep
    log_level: str = "INFO"
    log_json: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {v}"
            raise ValueError(msg)
        return level

    @property
    def log_level_number(self) -> int:
        """Get the numeric logging level."""
        level: int = logging.getLevelName(self.log_level)
        return level

    def to_retriever_config(self) -> RetrieverConfig:
        """Build the retriever configuration from these settings."""
        return RetrieverConfig(
            connect_timeout_seconds=self.connect_timeout_seconds,
            read_timeout_seconds=self.read_timeout_seconds,
            follow_redirects=self.follow_redirects,
            body_line_terminator=self.body_line_terminator,
        )

    def configure_logging(self, output: TextIO = sys.stderr) -> None:
        """Configure structured logging from log_level and log_json.

        Args:
            output: Output stream (default: stderr).
        """
        configure_logging(
            level=self.log_level_number,
            output=output,
            json_format=self.log_json,
        )


def get_settings() -> RetrieverSettings:
    """Get a settings instance."""
    return RetrieverSettings()
