"""HTTP constants for the retriever.

Centralizes header names, timeouts and status ranges used when a criteria
is turned into a request.
"""

# Request header names
HEADER_AUTHORIZATION = "Authorization"
HEADER_USER_AGENT = "User-Agent"
HEADER_ACCEPT = "Accept"
HEADER_CACHE_CONTROL = "Cache-Control"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_CONTENT_LENGTH = "Content-Length"

# Caching is always disabled
NO_CACHE = "no-cache"

# Timeouts (seconds)
DEFAULT_CONNECT_TIMEOUT_SECONDS = 5.0
DEFAULT_READ_TIMEOUT_SECONDS = 60.0

# HTTP Status Code Ranges
HTTP_STATUS_OK_MIN = 200
HTTP_STATUS_OK_MAX = 300

# Request bodies are sent as UTF-8
BODY_ENCODING = "utf-8"
