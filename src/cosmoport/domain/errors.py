"""Domain error classes.

Protocol-agnostic errors raised by the ship catalog.
The HTTP entrypoint translates them into responses; nothing here knows about status codes.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all catalog errors.

    Carries a human-readable message plus free-form context that adapters
    can serialize next to the error code.
    """

    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for the error (e.g., identifiers, bounds)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """A supplied value broke a ship field constraint (invalid argument).

    Examples:
        - name longer than 50 characters
        - production year outside [2800, 3019]
        - speed outside [0.01, 0.99]
        - non-positive ship identifier

    Raised before anything reaches the store: a create or update that fails
    validation leaves the catalog untouched.
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "speed", "message": "Must be between 0.01 and 0.99"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class PagingValidationError(ValidationError):
    """Raised when paging parameters are invalid."""

    pass


class NotFoundError(DomainError):
    """Addressed record is absent from the store.

    Raised on read, update and delete paths. A caller-visible condition,
    not a defect.
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Ship")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class OutOfRangeError(DomainError):
    """Requested page starts past the end of the filtered collection."""

    error_code: str = "OUT_OF_RANGE"

    def __init__(self, start: int, size: int, **context: Any) -> None:
        super().__init__(
            f"Page start {start} is beyond collection size {size}",
            start=start,
            size=size,
            **context,
        )
