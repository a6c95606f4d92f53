"""Error types for the retriever.

Every I/O failure during a retrieve is wrapped into ``HttpRetrieverError``;
it is the only failure ``retrieve`` raises besides criteria validation
errors.
"""

from enum import Enum

import httpx


class TransportErrorClass(str, Enum):
    """Classification of transport failures.

    - INVALID_URL: URL could not be parsed or has an unsupported scheme
    - CONNECT: Could not establish a connection
    - TIMEOUT: Connect, read, write or pool timeout
    - WRITE: Failed while sending the request (including the body)
    - READ: Failed while reading the response
    - PROTOCOL: Malformed HTTP exchange
    - UNKNOWN: Unclassified I/O failure
    """

    INVALID_URL = "INVALID_URL"
    CONNECT = "CONNECT"
    TIMEOUT = "TIMEOUT"
    WRITE = "WRITE"
    READ = "READ"
    PROTOCOL = "PROTOCOL"
    UNKNOWN = "UNKNOWN"


class HttpRetrieverError(Exception):
    """Wrapped I/O failure raised by a retrieve call.

    Attributes:
        message: Message of the original failure.
        error_class: Classification of the failure.
        cause: The original exception.
    """

    def __init__(
        self,
        message: str,
        cause: BaseException | None = None,
        error_class: TransportErrorClass = TransportErrorClass.UNKNOWN,
    ) -> None:
        """Initialize the retriever error.

        Args:
            message: Human-readable error message.
            cause: Original exception.
            error_class: Classification of the failure.
        """
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.error_class = error_class

    @classmethod
    def from_exception(cls, exc: BaseException) -> "HttpRetrieverError":
        """Wrap a host client or OS failure.

        Args:
            exc: Failure raised while talking to the host client.

        Returns:
            HttpRetrieverError carrying the original message and cause.
        """
        return cls(str(exc) or type(exc).__name__, exc, classify_transport_error(exc))


def classify_transport_error(exc: BaseException) -> TransportErrorClass:
    """Map an exception to a transport error class.

    Args:
        exc: Exception to classify.

    Returns:
        The matching TransportErrorClass.
    """
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return TransportErrorClass.INVALID_URL
    if isinstance(exc, httpx.TimeoutException):
        return TransportErrorClass.TIMEOUT
    if isinstance(exc, httpx.ConnectError):
        return TransportErrorClass.CONNECT
    if isinstance(exc, httpx.WriteError):
        return TransportErrorClass.WRITE
    if isinstance(exc, (httpx.ReadError, httpx.StreamError)):
        return TransportErrorClass.READ
    if isinstance(exc, httpx.ProtocolError):
        return TransportErrorClass.PROTOCOL
    return TransportErrorClass.UNKNOWN
