"""Request criteria: the validated description of one HTTP request."""

from httpretriever.criteria.authorization import (
    HttpRetrieverAuthorization,
    basic_credentials,
)
from httpretriever.criteria.builder import (
    HttpRetrieverCriteria,
    HttpRetrieverCriteriaBuilder,
)
from httpretriever.criteria.constants import ContentType, HTTPMethod
from httpretriever.criteria.errors import (
    CriteriaValidationError,
    MissingHeaderComponentError,
    MissingRequiredValueError,
    ValidationFailure,
    ValidationFailureKind,
)
from httpretriever.criteria.models import AuthorizationSecret, Header, QueryParameter
from httpretriever.criteria.url import assemble_url, join_query_parameters


__all__ = [
    # Criteria
    "HttpRetrieverCriteria",
    "HttpRetrieverCriteriaBuilder",
    # Models
    "AuthorizationSecret",
    "Header",
    "QueryParameter",
    # Enums
    "ContentType",
    "HTTPMethod",
    # Authorization
    "HttpRetrieverAuthorization",
    "basic_credentials",
    # Errors
    "CriteriaValidationError",
    "MissingHeaderComponentError",
    "MissingRequiredValueError",
    "ValidationFailure",
    "ValidationFailureKind",
    # URL assembly
    "assemble_url",
    "join_query_parameters",
]
