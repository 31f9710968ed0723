"""REST API error response models.

Documents the structured error body produced by the exception handlers.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error: which field failed and why."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "speed",
                "message": "Must be between 0.01 and 0.99",
                "code": "INVALID_SPEED",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Ship with identifier '42' not found",
                "code": "NOT_FOUND"
            }

        Validation error with multiple fields:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "name", "message": "...", "code": "INVALID_STRING"},
                    {"field": "speed", "message": "...", "code": "INVALID_SPEED"}
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Ship with identifier '42' not found", "code": "NOT_FOUND"},
                {"detail": "Page start 9 is beyond collection size 7", "code": "OUT_OF_RANGE"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "crew_size",
                            "message": "Must be between 1 and 9999",
                            "code": "INVALID_CREW_SIZE",
                        },
                    ],
                },
            ]
        }
    )
