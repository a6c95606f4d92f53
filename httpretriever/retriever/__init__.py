"""Single-request HTTP retriever.

Turns an ``HttpRetrieverCriteria`` into one HTTP exchange with:
- Fixed connect/read timeouts and caching disabled
- Status classification against the standard status table
- Buffered body on success, empty body otherwise
- Redacted request logging
"""

from httpretriever.retriever.client import HttpRetriever, retrieve, retrieve_criteria
from httpretriever.retriever.config import RetrieverConfig
from httpretriever.retriever.constants import (
    DEFAULT_CONNECT_TIMEOUT_SECONDS,
    DEFAULT_READ_TIMEOUT_SECONDS,
    HTTP_STATUS_OK_MAX,
    HTTP_STATUS_OK_MIN,
    NO_CACHE,
)
from httpretriever.retriever.errors import (
    HttpRetrieverError,
    TransportErrorClass,
    classify_transport_error,
)
from httpretriever.retriever.models import (
    FALLBACK_STATUS,
    HttpRetrieverResponse,
    ResponseStatus,
    classify_status,
)


__all__ = [
    # Client
    "HttpRetriever",
    "retrieve",
    "retrieve_criteria",
    # Config
    "RetrieverConfig",
    # Models
    "HttpRetrieverResponse",
    "ResponseStatus",
    "classify_status",
    "FALLBACK_STATUS",
    # Errors
    "HttpRetrieverError",
    "TransportErrorClass",
    "classify_transport_error",
    # Constants
    "DEFAULT_CONNECT_TIMEOUT_SECONDS",
    "DEFAULT_READ_TIMEOUT_SECONDS",
    "HTTP_STATUS_OK_MIN",
    "HTTP_STATUS_OK_MAX",
    "NO_CACHE",
]
