"""Single-request HTTP retriever built on httpx."""

from io import BytesIO

import httpx
import structlog

from httpretriever.criteria.builder import HttpRetrieverCriteria
from httpretriever.criteria.errors import MissingHeaderComponentError
from httpretriever.retriever.config import RetrieverConfig
from httpretriever.retriever.constants import (
    BODY_ENCODING,
    HEADER_ACCEPT,
    HEADER_AUTHORIZATION,
    HEADER_CACHE_CONTROL,
    HEADER_CONTENT_LENGTH,
    HEADER_CONTENT_TYPE,
    HEADER_USER_AGENT,
    NO_CACHE,
)
from httpretriever.retriever.errors import HttpRetrieverError
from httpretriever.retriever.models import HttpRetrieverResponse, classify_status
from httpretriever.observability.redact import redact_headers


logger = structlog.get_logger()


class HttpRetriever:
    """Issues exactly one HTTP exchange per criteria.

    Each call to ``retrieve`` opens its own host client, applies the
    criteria, executes once and closes the client before returning, on
    every path. There is no retry, no pooling across calls and no shared
    mutable state, so independent instances may be used from separate
    threads.

    Example:
        retriever = HttpRetriever()
        response = retriever.retrieve(criteria)
        if response.is_success:
            data = response.body.read()
    """

    def __init__(
        self,
        config: RetrieverConfig | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the retriever.

        Args:
            config: Timeouts and redirect behaviour (defaults if None).
            transport: Host client transport override, e.g.
                ``httpx.MockTransport`` in tests.
        """
        self._config = config or RetrieverConfig()
        self._transport = transport
        self._log = logger.bind(component="retriever")

    @property
    def config(self) -> RetrieverConfig:
        """Get the retriever configuration."""
        return self._config

    def retrieve(self, criteria: HttpRetrieverCriteria) -> HttpRetrieverResponse:
        """Execute the request described by a criteria.

        Args:
            criteria: Validated request description.

        Returns:
            Status code and body. The body is empty unless the status is
            classified as a success.

        Raises:
            MissingHeaderComponentError: If a header has a null type or value.
            HttpRetrieverError: On any I/O failure; the original exception
                is chained as the cause.
        """
        headers = self._build_headers(criteria)
        content = self._encode_body(criteria, headers)
        method = criteria.method.value

        log = self._log.bind(**criteria.bind_log_context())
        log.debug(
            "retrieve_start",
            headers=redact_headers(headers.multi_items()),
            body_bytes=len(content) if content is not None else 0,
        )

        try:
            with self._open_client() as client:
                return self._execute(client, method, criteria.url, headers, content, log)
        except httpx.WriteError as e:
            # Raised, not swallowed: a failed body write leaves no response to read
            log.error("request_body_write_failed", error=str(e))
            raise HttpRetrieverError.from_exception(e) from e
        except (httpx.HTTPError, httpx.InvalidURL, OSError) as e:
            error = HttpRetrieverError.from_exception(e)
            log.error(
                "retrieve_failed",
                error_class=error.error_class.value,
                error=error.message,
            )
            raise error from e

    def _open_client(self) -> httpx.Client:
        """Create the host client for a single exchange.

        Returns:
            Client configured with timeouts and redirect policy.
        """
        return httpx.Client(
            timeout=self._config.build_timeout(),
            follow_redirects=self._config.follow_redirects,
            transport=self._transport,
        )

    def _execute(
        self,
        client: httpx.Client,
        method: str,
        url: str,
        headers: httpx.Headers,
        content: bytes | None,
        log: structlog.stdlib.BoundLogger,
    ) -> HttpRetrieverResponse:
        """Send the request once and buffer the body on success.

        Args:
            client: Open host client.
            method: HTTP method token.
            url: Assembled request URL.
            headers: Request headers.
            content: Encoded body, if any.
            log: Bound logger.

        Returns:
            HttpRetrieverResponse for the exchange.
        """
        with client.stream(method, url, headers=headers, content=content) as response:
            status = classify_status(response.status_code)

            if not status.is_success:
                # Body is discarded unread
                log.warning(
                    "response_received",
                    status=status.name,
                    status_code=status.code,
                    recognized=status.recognized,
                )
                return HttpRetrieverResponse(
                    status_code=status.code, body=BytesIO(), status=status
                )

            body = response.read()
            log.info(
                "response_received",
                status=status.name,
                status_code=status.code,
                bytes=len(body),
            )
            return HttpRetrieverResponse(
                status_code=status.code, body=BytesIO(body), status=status
            )

    def _build_headers(self, criteria: HttpRetrieverCriteria) -> httpx.Headers:
        """Build request headers from a criteria.

        Caller headers are applied last in insertion order, so a later
        header replaces an earlier one with the same name.

        Args:
            criteria: Request description.

        Returns:
            Headers for the request.

        Raises:
            MissingHeaderComponentError: If a header has a null component.
        """
        headers = httpx.Headers()

        if criteria.authorization is not None:
            headers[HEADER_AUTHORIZATION] = criteria.authorization.reveal()

        headers[HEADER_USER_AGENT] = criteria.user_agent

        if criteria.accept_content_type is not None:
            headers[HEADER_ACCEPT] = criteria.accept_content_type.mime_type

        headers[HEADER_CACHE_CONTROL] = NO_CACHE

        if criteria.body_content_type is not None:
            headers[HEADER_CONTENT_TYPE] = criteria.body_content_type.mime_type

        for header in criteria.headers:
            if header.type is None:
                raise MissingHeaderComponentError("type", "Header type cannot be null")
            if header.value is None:
                raise MissingHeaderComponentError(header.type, "Header cannot be null")
            headers[header.type] = header.value

        return headers

    def _encode_body(
        self,
        criteria: HttpRetrieverCriteria,
        headers: httpx.Headers,
    ) -> bytes | None:
        """Encode the request body and set its Content-Length.

        Args:
            criteria: Request description.
            headers: Request headers, updated in place.

        Returns:
            Encoded body with the line terminator appended, or None.
        """
        if criteria.body is None:
            return None

        content = (criteria.body + self._config.body_line_terminator).encode(
            BODY_ENCODING
        )
        headers[HEADER_CONTENT_LENGTH] = str(len(content))
        return content


def retrieve_criteria(
    criteria: HttpRetrieverCriteria,
    config: RetrieverConfig | None = None,
    transport: httpx.BaseTransport | None = None,
) -> HttpRetrieverResponse:
    """Execute a criteria with a one-off retriever.

    Args:
        criteria: Validated request description.
        config: Optional retriever configuration.
        transport: Optional host client transport override.

    Returns:
        HttpRetrieverResponse for the exchange.
    """
    return HttpRetriever(config=config, transport=transport).retrieve(criteria)


retrieve = retrieve_criteria
