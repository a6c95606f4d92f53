"""Observability module for structured logging and log redaction."""

from httpretriever.observability.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
    get_logger,
    redact_event_fields,
)
from httpretriever.observability.redact import (
    REDACTED_VALUE,
    is_sensitive_header,
    redact_headers,
    redact_url_credentials,
)


__all__ = [
    "bind_request_context",
    "clear_request_context",
    "configure_logging",
    "get_logger",
    "redact_event_fields",
    # Redaction
    "REDACTED_VALUE",
    "is_sensitive_header",
    "redact_headers",
    "redact_url_credentials",
]
