"""Configuration model for the retriever."""

import os
from typing import Annotated

import httpx
from pydantic import Field

from httpretriever.data_model.base import StrictBaseModel
from httpretriever.retriever.constants import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_READ_TIMEOUT_SECONDS,
)


class RetrieverConfig(StrictBaseModel):
    """Configuration for a single-request retriever.

    Defaults match the fixed behaviour of the retriever: a 5 second
    connect timeout, a 60 second read timeout, redirects followed
    transparently by the host client.
    """

    connect_timeout_seconds: Annotated[float, Field(gt=0.0, le=300.0)] = (
        DEFAULT_CONNECT_TIMEOUT_SECONDS
    )
    read_timeout_seconds: Annotated[float, Field(gt=0.0, le=3600.0)] = (
        DEFAULT_READ_TIMEOUT_SECONDS
    )
    follow_redirects: bool = Field(
        default=True,
        description="Follow redirects transparently in the host client",
    )
    body_line_terminator: str = Field(
        default=os.linesep,
        description="Terminator appended to every request body",
    )

    def build_timeout(self) -> httpx.Timeout:
        """Build the host client timeout.

        Returns:
            Timeout with the connect timeout split out from read/write/pool.
        """
        return httpx.Timeout(
            self.read_timeout_seconds,
            connect=self.connect_timeout_seconds,
        )
