"""Data models for retriever results."""

from http import HTTPStatus
from io import BytesIO

from pydantic import Field

from httpretriever.data_model.base import StrictArbitraryModel, StrictBaseModel
from httpretriever.retriever.constants import HTTP_STATUS_OK_MAX, HTTP_STATUS_OK_MIN


# Classification used for codes outside the standard table
FALLBACK_STATUS = HTTPStatus.INTERNAL_SERVER_ERROR


class ResponseStatus(StrictBaseModel):
    """Classification of a numeric status code.

    Every code resolves to an entry of the standard status table; codes
    the table does not know resolve to INTERNAL_SERVER_ERROR with
    ``recognized`` set to False.
    """

    code: int = Field(description="Status code as read from the response")
    status: HTTPStatus = Field(description="Resolved table entry")
    recognized: bool = Field(description="Whether code is in the standard table")

    @property
    def name(self) -> str:
        """Get the classification name, e.g. NOT_FOUND."""
        return self.status.name

    @property
    def is_success(self) -> bool:
        """Check if the classification is in the 2xx success range."""
        return HTTP_STATUS_OK_MIN <= self.status.value < HTTP_STATUS_OK_MAX


def classify_status(code: int) -> ResponseStatus:
    """Classify a status code against the standard table.

    Args:
        code: Numeric HTTP status code.

    Returns:
        ResponseStatus for the code.
    """
    try:
        return ResponseStatus(code=code, status=HTTPStatus(code), recognized=True)
    except ValueError:
        return ResponseStatus(code=code, status=FALLBACK_STATUS, recognized=False)


class HttpRetrieverResponse(StrictArbitraryModel):
    """Result of a single retrieve call.

    The body is fully buffered in memory; the connection has already been
    released by the time this is returned. Non-success responses carry an
    empty body.

    ``status_code`` is always the code read from the wire, so an
    unrecognized code such as 799 stays 799 rather than becoming the
    fallback 500; only ``status`` resolves to ``FALLBACK_STATUS`` with
    ``recognized=False``.
    """

    status_code: int = Field(description="HTTP status code")
    body: BytesIO = Field(default_factory=BytesIO, description="Response body stream")
    status: ResponseStatus | None = Field(
        default=None, description="Classification of status_code"
    )

    @property
    def is_success(self) -> bool:
        """Check if the response was classified as a success."""
        return (self.status or classify_status(self.status_code)).is_success

    @property
    def content(self) -> bytes:
        """Get the whole body without moving the stream position."""
        return self.body.getvalue()
