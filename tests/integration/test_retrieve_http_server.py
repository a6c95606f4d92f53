"""Integration tests for the retriever against a local HTTP server."""

import json
import os
import threading
from collections.abc import Generator
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

from httpretriever import (
    ContentType,
    Header,
    HTTPMethod,
    HttpRetriever,
    HttpRetrieverCriteriaBuilder,
    HttpRetrieverError,
    QueryParameter,
    TransportErrorClass,
    basic_credentials,
)


def get_server_url(server: HTTPServer, path: str = "/resource") -> str:
    """Get the URL for a test server.

    Args:
        server: The HTTP server instance.
        path: The URL path.

    Returns:
        Complete URL for the server.
    """
    host, port = server.server_address[0], server.server_address[1]
    if isinstance(host, bytes):
        host = host.decode("utf-8")
    return f"http://{host}:{port}{path}"


class EchoHTTPHandler(BaseHTTPRequestHandler):
    """HTTP handler that echoes the request back as JSON."""

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        """Suppress log messages during tests."""

    def _echo(self) -> None:
        if self.path.startswith("/missing"):
            body = b"nothing here"
            self.send_response(404)
        elif self.path.startswith("/teapot"):
            body = b"short and stout"
            self.send_response(418)
        else:
            length = int(self.headers.get("Content-Length") or 0)
            payload = {
                "method": self.command,
                "path": self.path,
                "headers": {key.lower(): value for key, value in self.headers.items()},
                "body": self.rfile.read(length).decode("utf-8"),
            }
            body = json.dumps(payload).encode("utf-8")
            self.send_response(200)
            self.send_header("Content-Type", "application/json")

        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self) -> None:  # noqa: N802
        self._echo()

    def do_POST(self) -> None:  # noqa: N802
        self._echo()

    def do_PUT(self) -> None:  # noqa: N802
        self._echo()

    def do_DELETE(self) -> None:  # noqa: N802
        self._echo()


@pytest.fixture
def http_server() -> Generator[HTTPServer, None, None]:
    """Start a local echo server on a free port."""
    server = HTTPServer(("127.0.0.1", 0), EchoHTTPHandler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server
    server.shutdown()
    server.server_close()


class TestRetrieveAgainstServer:
    """End-to-end retrieve calls over a real socket."""

    def test_get_with_query_and_headers(self, http_server: HTTPServer) -> None:
        """Test a GET with query parameters, headers and authorization."""
        criteria = (
            HttpRetrieverCriteriaBuilder()
            .set_url(get_server_url(http_server, "/search"))
            .set_method(HTTPMethod.GET)
            .set_user_agent("Mozilla/5.0 (integration)")
            .set_accept_content_type(ContentType.JSON)
            .set_authorization(basic_credentials("user", "passwd"))
            .set_header(Header(type="X-Request-Id", value="req-42"))
            .set_query_parameter(QueryParameter(field="q", value="python"))
            .set_query_parameter(QueryParameter(field="page", value="2"))
            .build()
        )

        response = HttpRetriever().retrieve(criteria)

        assert response.status_code == 200
        echoed = json.loads(response.body.read())
        assert echoed["method"] == "GET"
        assert echoed["path"] == "/search?q=python&page=2"
        assert echoed["headers"]["user-agent"] == "Mozilla/5.0 (integration)"
        assert echoed["headers"]["accept"] == "application/json; charset=UTF-8"
        assert echoed["headers"]["cache-control"] == "no-cache"
        assert echoed["headers"]["authorization"] == "Basic dXNlcjpwYXNzd2Q="
        assert echoed["headers"]["x-request-id"] == "req-42"

    def test_post_body(self, http_server: HTTPServer) -> None:
        """Test that the body arrives with its line terminator."""
        criteria = (
            HttpRetrieverCriteriaBuilder()
            .set_url(get_server_url(http_server))
            .set_method(HTTPMethod.POST)
            .set_user_agent("agent")
            .set_body('{"name": "widget"}')
            .set_body_content_type(ContentType.JSON)
            .build()
        )

        response = HttpRetriever().retrieve(criteria)

        echoed = json.loads(response.content)
        expected_body = '{"name": "widget"}' + os.linesep
        assert echoed["method"] == "POST"
        assert echoed["body"] == expected_body
        assert echoed["headers"]["content-length"] == str(len(expected_body.encode()))
        assert echoed["headers"]["content-type"] == "application/json; charset=UTF-8"

    @pytest.mark.parametrize(("path", "status"), [("/missing", 404), ("/teapot", 418)])
    def test_non_success_has_empty_body(
        self, http_server: HTTPServer, path: str, status: int
    ) -> None:
        """Test that the server's error body is not surfaced."""
        criteria = HttpRetrieverCriteriaBuilder(
            url=get_server_url(http_server, path),
            method=HTTPMethod.GET,
            user_agent="agent",
        ).build()

        response = HttpRetriever().retrieve(criteria)

        assert response.status_code == status
        assert response.content == b""

    def test_connection_refused(self, http_server: HTTPServer) -> None:
        """Test that a refused connection raises HttpRetrieverError."""
        url = get_server_url(http_server)
        http_server.shutdown()
        http_server.server_close()

        criteria = HttpRetrieverCriteriaBuilder(
            url=url, method=HTTPMethod.GET, user_agent="agent"
        ).build()

        with pytest.raises(HttpRetrieverError) as exc_info:
            HttpRetriever().retrieve(criteria)

        assert exc_info.value.error_class == TransportErrorClass.CONNECT
        assert exc_info.value.__cause__ is not None
