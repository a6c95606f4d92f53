"""Value types that make up a request criteria."""

from types import TracebackType

from pydantic import Field

from httpretriever.data_model.base import StrictBaseModel


class Header(StrictBaseModel):
    """A request header as supplied by the caller.

    Either component may be None here; null components are rejected when
    the header is applied to a request.
    """

    type: str | None = Field(description="Header name, e.g. X-Request-Id")
    value: str | None = Field(description="Header value")


class QueryParameter(StrictBaseModel):
    """A single field=value pair for the query string."""

    field: str = Field(description="Parameter name")
    value: str | None = Field(description="Parameter value (required at build time)")


class AuthorizationSecret:
    """Authorization value held in a zeroable buffer.

    The secret is kept in a ``bytearray`` rather than an immutable string so
    that callers can wipe it once the request has been issued. Its repr
    never shows the content.

    Example:
        with AuthorizationSecret("Bearer abc") as secret:
            criteria = builder.set_authorization(secret).build()
            retriever.retrieve(criteria)
        # buffer zeroed here
    """

    _MASK = "**********"

    def __init__(self, value: str | bytes | bytearray) -> None:
        """Copy the secret into an owned buffer.

        Args:
            value: Authorization header value. Strings are UTF-8 encoded.

        Raises:
            TypeError: If value is not str, bytes or bytearray.
        """
        if isinstance(value, str):
            self._buffer = bytearray(value.encode("utf-8"))
        elif isinstance(value, (bytes, bytearray)):
            self._buffer = bytearray(value)
        else:
            msg = f"Unsupported authorization type: {type(value).__name__}"
            raise TypeError(msg)
        self._cleared = False

    @property
    def is_cleared(self) -> bool:
        """Whether the buffer has been zeroed."""
        return self._cleared

    def reveal(self) -> str:
        """Decode the secret for the moment it is applied to a request.

        Returns:
            The header value.

        Raises:
            ValueError: If the secret has already been cleared.
        """
        if self._cleared:
            msg = "Authorization secret has been cleared"
            raise ValueError(msg)
        return self._buffer.decode("utf-8")

    def clear(self) -> None:
        """Overwrite the buffer with zero bytes."""
        for index in range(len(self._buffer)):
            self._buffer[index] = 0
        self._cleared = True

    def __len__(self) -> int:
        return len(self._buffer)

    def __enter__(self) -> "AuthorizationSecret":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.clear()

    def __repr__(self) -> str:
        return f"AuthorizationSecret('{self._MASK}')"

    def __str__(self) -> str:
        return self._MASK
