"""Request-criteria builder and single-request HTTP retriever."""

from httpretriever.criteria import (
    AuthorizationSecret,
    ContentType,
    CriteriaValidationError,
    Header,
    HttpRetrieverAuthorization,
    HttpRetrieverCriteria,
    HttpRetrieverCriteriaBuilder,
    HTTPMethod,
    MissingHeaderComponentError,
    MissingRequiredValueError,
    QueryParameter,
    ValidationFailure,
    basic_credentials,
)
from httpretriever.retriever import (
    HttpRetriever,
    HttpRetrieverError,
    HttpRetrieverResponse,
    ResponseStatus,
    RetrieverConfig,
    TransportErrorClass,
    classify_status,
    retrieve,
    retrieve_criteria,
)


__version__ = "1.0.0"

__all__ = [
    "AuthorizationSecret",
    "ContentType",
    "CriteriaValidationError",
    "HTTPMethod",
    "Header",
    "HttpRetriever",
    "HttpRetrieverAuthorization",
    "HttpRetrieverCriteria",
    "HttpRetrieverCriteriaBuilder",
    "HttpRetrieverError",
    "HttpRetrieverResponse",
    "MissingHeaderComponentError",
    "MissingRequiredValueError",
    "QueryParameter",
    "ResponseStatus",
    "RetrieverConfig",
    "TransportErrorClass",
    "ValidationFailure",
    "basic_credentials",
    "classify_status",
    "retrieve",
    "retrieve_criteria",
]
