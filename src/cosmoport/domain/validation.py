"""Field predicates for ship records.

All checks are pure and accept None or a value of the wrong type (neither is
ever valid), so callers can pass raw optional values straight through.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from cosmoport.domain.dates import year_of

if TYPE_CHECKING:
    from cosmoport.domain.ship import Ship


MAX_STRING_LENGTH = 50
MIN_PROD_YEAR = 2800
MAX_PROD_YEAR = 3019
MIN_CREW_SIZE = 1
MAX_CREW_SIZE = 9999
MIN_SPEED = 0.01
MAX_SPEED = 0.99


def is_string_valid(value: str | None) -> bool:
    return isinstance(value, str) and 0 < len(value) <= MAX_STRING_LENGTH


def is_date_valid(value: datetime | None) -> bool:
    if not isinstance(value, datetime):
        return False
    return MIN_PROD_YEAR <= year_of(value) <= MAX_PROD_YEAR


def is_crew_size_valid(value: int | None) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_CREW_SIZE <= value <= MAX_CREW_SIZE


def is_speed_valid(value: float | None) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return MIN_SPEED <= value <= MAX_SPEED


def is_ship_valid(ship: Ship | None) -> bool:
    """
    Check every constrained field of a ship.

    ship_type and is_used carry no predicate of their own.
    """
    return (
        ship is not None
        and is_string_valid(ship.name)
        and is_string_valid(ship.planet)
        and is_date_valid(ship.prod_date)
        and is_crew_size_valid(ship.crew_size)
        and is_speed_valid(ship.speed)
    )
