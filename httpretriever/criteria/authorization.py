"""Helpers for building Authorization header values."""

import base64
from enum import Enum

from httpretriever.criteria.models import AuthorizationSecret


class HttpRetrieverAuthorization(str, Enum):
    """Authorization schemes with their header prefix.

    - BASIC: credentials are UTF-8 encoded then Base64 encoded
    - BEARER: token is sent as-is
    """

    BASIC = "Basic"
    BEARER = "Bearer"

    def create(self, credentials: str) -> AuthorizationSecret:
        """Create an authorization secret for this scheme.

        Args:
            credentials: "user:password" for BASIC, the token for BEARER.

        Returns:
            AuthorizationSecret holding the complete header value.
        """
        if self is HttpRetrieverAuthorization.BASIC:
            encoded = base64.b64encode(credentials.encode("utf-8"))
            buffer = bytearray(b"Basic ")
            buffer.extend(encoded)
            secret = AuthorizationSecret(buffer)
            buffer[:] = bytes(len(buffer))
            return secret
        return AuthorizationSecret(f"{self.value} {credentials}")


def basic_credentials(user: str, password: str) -> AuthorizationSecret:
    """Build a Basic authorization secret from a user and password."""
    return HttpRetrieverAuthorization.BASIC.create(f"{user}:{password}")
