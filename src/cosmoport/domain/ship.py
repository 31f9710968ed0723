from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from cosmoport.domain.errors import PagingValidationError, ValidationError
from cosmoport.domain.validation import (
    MAX_CREW_SIZE,
    MAX_PROD_YEAR,
    MAX_SPEED,
    MAX_STRING_LENGTH,
    MIN_CREW_SIZE,
    MIN_PROD_YEAR,
    MIN_SPEED,
    is_crew_size_valid,
    is_date_valid,
    is_speed_valid,
    is_string_valid,
)


class ShipType(str, Enum):
    TRANSPORT = "TRANSPORT"
    MILITARY = "MILITARY"
    MERCHANT = "MERCHANT"


class ShipOrder(str, Enum):
    """Sort keys accepted by the catalog query engine."""

    ID = "ID"
    SPEED = "SPEED"
    DATE = "DATE"
    RATING = "RATING"


@dataclass(frozen=True)
class Ship:
    id: int | None
    name: str
    planet: str
    ship_type: ShipType
    prod_date: datetime
    is_used: bool
    speed: float
    crew_size: int
    rating: float


# ==============================================================================
# Field error helpers
# ==============================================================================

# field -> (predicate, message, code)
_FIELD_RULES: dict[str, tuple[Callable[[Any], bool], str, str]] = {
    "name": (
        is_string_valid,
        f"Must be a non-empty string of at most {MAX_STRING_LENGTH} characters",
        "INVALID_STRING",
    ),
    "planet": (
        is_string_valid,
        f"Must be a non-empty string of at most {MAX_STRING_LENGTH} characters",
        "INVALID_STRING",
    ),
    "prod_date": (
        is_date_valid,
        f"Production year must be between {MIN_PROD_YEAR} and {MAX_PROD_YEAR}",
        "INVALID_DATE",
    ),
    "speed": (
        is_speed_valid,
        f"Must be between {MIN_SPEED} and {MAX_SPEED}",
        "INVALID_SPEED",
    ),
    "crew_size": (
        is_crew_size_valid,
        f"Must be between {MIN_CREW_SIZE} and {MAX_CREW_SIZE}",
        "INVALID_CREW_SIZE",
    ),
}


def field_errors(values: dict[str, Any]) -> list[dict[str, str]]:
    """
    Run the field predicates over the given values.

    Only keys present in ``values`` are checked; a present key holding None
    fails its predicate. ship_type must be a ShipType member when present.

    Returns:
        One error dict per failing field, in a stable field order
    """
    errors: list[dict[str, str]] = []
    for field, (is_valid, message, code) in _FIELD_RULES.items():
        if field in values and not is_valid(values[field]):
            errors.append({"field": field, "message": message, "code": code})

    if "ship_type" in values and not isinstance(values["ship_type"], ShipType):
        errors.append(
            {
                "field": "ship_type",
                "message": f"Must be one of {[t.value for t in ShipType]}",
                "code": "INVALID_SHIP_TYPE",
            }
        )
    if "is_used" in values and not isinstance(values["is_used"], bool):
        errors.append(
            {"field": "is_used", "message": "Must be a boolean", "code": "INVALID_BOOLEAN"}
        )
    return errors


# ==============================================================================
# Update patch
# ==============================================================================


@dataclass(frozen=True, slots=True)
class ShipPatch:
    """
    Proposed changes to an existing ship.

    A None field means "leave unchanged". The patch is validated as a whole
    before anything is merged, so a failing field never leaves the other
    fields applied.
    """

    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    prod_date: datetime | None = None
    is_used: bool | None = None
    speed: float | None = None
    crew_size: int | None = None

    def changes(self) -> dict[str, Any]:
        """Supplied fields only, keyed by Ship attribute name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def is_empty(self) -> bool:
        return not self.changes()

    def validate(self) -> None:
        """
        Validate every supplied field.

        Raises:
            ValidationError: Listing each failing field
        """
        errors = field_errors(self.changes())
        if errors:
            raise ValidationError(errors=errors)


# ==============================================================================
# Query parameters
# ==============================================================================


@dataclass(frozen=True, slots=True)
class ShipFilters:
    """
    Optional query predicates, combined with AND semantics.

    ``after`` and ``before`` are epoch milliseconds. ``after`` drops ships
    produced later than it and ``before`` drops ships produced earlier than it.
    """

    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    after: int | None = None
    before: int | None = None
    is_used: bool | None = None
    min_speed: float | None = None
    max_speed: float | None = None
    min_crew_size: int | None = None
    max_crew_size: int | None = None
    min_rating: float | None = None
    max_rating: float | None = None


DEFAULT_PAGE_NUMBER = 0
DEFAULT_PAGE_SIZE = 3


@dataclass(frozen=True, slots=True)
class Paging:
    page_number: int = DEFAULT_PAGE_NUMBER
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def start(self) -> int:
        return self.page_number * self.page_size

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.page_number < 0:
            raise PagingValidationError("page_number must be >= 0")
        if self.page_size <= 0:
            raise PagingValidationError("page_size must be > 0")
