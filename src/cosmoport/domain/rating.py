from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

# "Now" in the catalog's calendar; not wall-clock time
CURRENT_YEAR = 3019

USED_COEFFICIENT = 0.5
NEW_COEFFICIENT = 1.0


def compute_rating(speed: float, is_used: bool, production_year: int) -> float:
    """
    Derive a ship's rating.

    rating = 80 * speed * k / (CURRENT_YEAR - production_year + 1)

    where k is 0.5 for used ships and 1 otherwise. The result is rounded to
    2 decimal places: rating * 100 is rounded ROUND_HALF_UP to an integer,
    then divided by 100. Inputs must already be validated:
    production_year <= CURRENT_YEAR keeps the denominator >= 1.
    """
    k = USED_COEFFICIENT if is_used else NEW_COEFFICIENT
    rating = 80 * speed * k / (CURRENT_YEAR - production_year + 1)

    # Explicit rounding on the scaled value, not on the decimal digits
    scaled = Decimal(rating * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return float(scaled / 100)
