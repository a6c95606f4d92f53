"""Closed enumerations used to describe a request."""

from enum import Enum


class ContentType(str, Enum):
    """Content types understood by the retriever.

    Each member's value is the MIME string sent on the wire, including the
    charset where one applies.
    """

    JSON = "application/json; charset=UTF-8"
    PNG = "image/png"
    PDF = "application/pdf"
    TEXT = "text/html; charset=UTF-8"
    XML = "application/xml; charset=UTF-8"

    @property
    def mime_type(self) -> str:
        """Get the header value for this content type."""
        return self.value


class HTTPMethod(str, Enum):
    """HTTP methods a criteria may be issued with."""

    GET = "GET"
    PUT = "PUT"
    DELETE = "DELETE"
    TRACE = "TRACE"
    POST = "POST"
