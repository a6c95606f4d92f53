"""Validation errors raised while describing a request.

Validation errors are usage errors: they are raised synchronously, never
retried, and are kept apart from transport failures so callers can tell a
malformed criteria from a failed exchange.
"""

from enum import Enum
from typing import Annotated

from pydantic import Field

from httpretriever.data_model.base import StrictBaseModel


class ValidationFailureKind(str, Enum):
    """Classification of a criteria validation failure.

    - MISSING_REQUIRED_VALUE: URL, method, user agent or a query value absent
    - MISSING_HEADER_COMPONENT: a header with a null type or value
    """

    MISSING_REQUIRED_VALUE = "MISSING_REQUIRED_VALUE"
    MISSING_HEADER_COMPONENT = "MISSING_HEADER_COMPONENT"


class ValidationFailure(StrictBaseModel):
    """Non-raising description of why a criteria is invalid."""

    kind: ValidationFailureKind = Field(description="Failure classification")
    field: str = Field(description="Offending field, may be an empty parameter name")
    message: Annotated[str, Field(min_length=1, description="Human-readable message")]

    def to_error(self) -> "CriteriaValidationError":
        """Convert to the matching exception.

        Returns:
            Exception instance ready to raise.
        """
        if self.kind == ValidationFailureKind.MISSING_HEADER_COMPONENT:
            return MissingHeaderComponentError(self.field, self.message)
        return MissingRequiredValueError(self.field)


class CriteriaValidationError(ValueError):
    """Base exception for invalid request criteria."""

    kind: ValidationFailureKind

    def __init__(self, field: str, message: str) -> None:
        """Initialize the validation error.

        Args:
            field: Human-readable description of the offending field.
            message: Human-readable error message.
        """
        super().__init__(message)
        self.field = field
        self.message = message

    def to_failure(self) -> ValidationFailure:
        """Convert to a serializable failure record."""
        return ValidationFailure(kind=self.kind, field=self.field, message=self.message)


class MissingRequiredValueError(CriteriaValidationError):
    """Raised by the builder when a required value is absent."""

    kind = ValidationFailureKind.MISSING_REQUIRED_VALUE

    def __init__(self, field: str) -> None:
        """Initialize the error with the missing field's description.

        Args:
            field: Description of the missing field, e.g. "URL".
        """
        super().__init__(field, f"Missing required {field}.")


class MissingHeaderComponentError(CriteriaValidationError):
    """Raised when a header is applied with a null type or value."""

    kind = ValidationFailureKind.MISSING_HEADER_COMPONENT
