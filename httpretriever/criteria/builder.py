"""Request criteria and its builder.

The builder accumulates fields without validating them; ``build()`` checks
the required ones, assembles the final URL and returns an immutable
``HttpRetrieverCriteria``.
"""

from collections.abc import Iterable
from typing import TypeVar

from pydantic import Field

from httpretriever.criteria.constants import ContentType, HTTPMethod
from httpretriever.criteria.errors import MissingRequiredValueError, ValidationFailure
from httpretriever.criteria.models import AuthorizationSecret, Header, QueryParameter
from httpretriever.criteria.url import assemble_url
from httpretriever.data_model.base import StrictArbitraryModel
from httpretriever.observability.redact import redact_url_credentials


# Human-readable descriptions reported for missing required values
URL_FIELD = "URL"
METHOD_FIELD = "HTTP Method GET, POST etc"
USER_AGENT_FIELD = "Mozilla/5.0 etc"

AuthorizationInput = AuthorizationSecret | str | bytes | bytearray

T = TypeVar("T")


class HttpRetrieverCriteria(StrictArbitraryModel):
    """Complete, immutable description of one HTTP request.

    ``url`` already carries the query string assembled from
    ``query_parameters``; the parameters are kept for introspection only.
    """

    url: str = Field(description="Fully assembled request URL")
    method: HTTPMethod = Field(description="HTTP method")
    user_agent: str = Field(description="User-Agent header value")
    body: str | None = Field(default=None, description="Request body")
    body_content_type: ContentType | None = Field(
        default=None, description="Content-Type of the body"
    )
    accept_content_type: ContentType | None = Field(
        default=None, description="Accepted response content type"
    )
    headers: tuple[Header, ...] = Field(
        default=(), description="Caller headers in insertion order"
    )
    query_parameters: tuple[QueryParameter, ...] = Field(
        default=(), description="Query parameters folded into url"
    )
    authorization: AuthorizationSecret | None = Field(
        default=None, repr=False, exclude=True, description="Authorization secret"
    )

    @property
    def has_authorization(self) -> bool:
        """Whether an authorization secret is attached."""
        return self.authorization is not None

    def bind_log_context(self) -> dict[str, object]:
        """Build structured log fields describing this criteria.

        The authorization value and header values are never included;
        credentials embedded in the URL are redacted.

        Returns:
            Dictionary suitable for ``logger.bind(**...)``.
        """
        return {
            "method": self.method.value,
            "url": redact_url_credentials(self.url),
            "user_agent": self.user_agent,
            "header_names": [header.type for header in self.headers],
            "has_authorization": self.has_authorization,
            "has_body": self.body is not None,
        }


class HttpRetrieverCriteriaBuilder:
    """Fluent accumulator for ``HttpRetrieverCriteria``.

    Scalar setters overwrite the previous value; header and query parameter
    setters append. Nothing is validated until ``validate()`` or
    ``build()`` is called.

    Example:
        criteria = (
            HttpRetrieverCriteriaBuilder()
            .set_url("https://example.com/api")
            .set_method(HTTPMethod.GET)
            .set_user_agent("Mozilla/5.0")
            .set_query_parameter(QueryParameter(field="page", value="2"))
            .build()
        )
    """

    def __init__(
        self,
        *,
        url: str | None = None,
        method: HTTPMethod | None = None,
        user_agent: str | None = None,
        body: str | None = None,
        body_content_type: ContentType | None = None,
        accept_content_type: ContentType | None = None,
        authorization: AuthorizationInput | None = None,
        headers: Iterable[Header] = (),
        query_parameters: Iterable[QueryParameter] = (),
    ) -> None:
        """Seed the builder, optionally from keyword arguments.

        Args:
            url: Base URL without the assembled query string.
            method: HTTP method.
            user_agent: User-Agent header value.
            body: Request body.
            body_content_type: Content-Type of the body.
            accept_content_type: Accepted response content type.
            authorization: Authorization header value or secret.
            headers: Initial headers.
            query_parameters: Initial query parameters.
        """
        self._url = url
        self._method = method
        self._user_agent = user_agent
        self._body = body
        self._body_content_type = body_content_type
        self._accept_content_type = accept_content_type
        self._authorization: AuthorizationSecret | None = None
        self._headers: list[Header] = list(headers)
        self._query_parameters: list[QueryParameter] = list(query_parameters)
        if authorization is not None:
            self.set_authorization(authorization)

    def set_url(self, url: str | None) -> "HttpRetrieverCriteriaBuilder":
        self._url = url
        return self

    def set_method(self, method: HTTPMethod | None) -> "HttpRetrieverCriteriaBuilder":
        self._method = method
        return self

    def set_body(self, body: str | None) -> "HttpRetrieverCriteriaBuilder":
        self._body = body
        return self

    def set_body_content_type(
        self, content_type: ContentType | None
    ) -> "HttpRetrieverCriteriaBuilder":
        self._body_content_type = content_type
        return self

    def set_accept_content_type(
        self, content_type: ContentType | None
    ) -> "HttpRetrieverCriteriaBuilder":
        self._accept_content_type = content_type
        return self

    def set_user_agent(self, user_agent: str | None) -> "HttpRetrieverCriteriaBuilder":
        """Set the User-Agent, e.g. a browser string from a user agent catalogue."""
        self._user_agent = user_agent
        return self

    def set_authorization(
        self, authorization: AuthorizationInput | None
    ) -> "HttpRetrieverCriteriaBuilder":
        """Set the Authorization header value.

        Plain strings and bytes are copied into an ``AuthorizationSecret``;
        an existing secret is kept by reference so the caller can clear it.
        See ``HttpRetrieverAuthorization`` for Basic and Bearer helpers.

        Args:
            authorization: Header value, secret, or None to unset.

        Returns:
            The builder.
        """
        if authorization is None or isinstance(authorization, AuthorizationSecret):
            self._authorization = authorization
        else:
            self._authorization = AuthorizationSecret(authorization)
        return self

    def set_header(self, header: Header) -> "HttpRetrieverCriteriaBuilder":
        return self.set_headers([header])

    def set_headers(self, headers: Iterable[Header]) -> "HttpRetrieverCriteriaBuilder":
        """Append headers; earlier headers are kept, duplicates allowed."""
        self._headers.extend(headers)
        return self

    def set_query_parameter(
        self, query_parameter: QueryParameter
    ) -> "HttpRetrieverCriteriaBuilder":
        self._query_parameters.append(query_parameter)
        return self

    def validate(self) -> ValidationFailure | None:
        """Check required values without raising.

        Checks run in order URL, method, user agent, then each query
        parameter's value; the first failure is reported.

        Returns:
            The first failure, or None when the builder is complete.
        """
        try:
            self._require_values()
        except MissingRequiredValueError as e:
            return e.to_failure()
        return None

    def build(self) -> HttpRetrieverCriteria:
        """Validate and build the criteria.

        Returns:
            Immutable criteria with the assembled URL.

        Raises:
            MissingRequiredValueError: If a required value is absent.
        """
        url, method, user_agent = self._require_values()

        return HttpRetrieverCriteria(
            url=assemble_url(url, self._query_parameters),
            method=method,
            user_agent=user_agent,
            body=self._body,
            body_content_type=self._body_content_type,
            accept_content_type=self._accept_content_type,
            headers=tuple(self._headers),
            query_parameters=tuple(self._query_parameters),
            authorization=self._authorization,
        )

    def _require_values(self) -> tuple[str, HTTPMethod, str]:
        """Return URL, method and user agent once every required value is set.

        Raises:
            MissingRequiredValueError: For the first missing value.
        """
        url = _require(self._url, URL_FIELD)
        method = _require(self._method, METHOD_FIELD)
        user_agent = _require(self._user_agent, USER_AGENT_FIELD)
        for param in self._query_parameters:
            _require(param.value, param.field)
        return url, method, user_agent


def _require(value: T | None, field: str) -> T:
    if value is None:
        raise MissingRequiredValueError(field)
    return value
