from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable

import pytest

from cosmoport.domain.rating import compute_rating
from cosmoport.domain.ship import Ship, ShipType


def build_ship(**overrides: Any) -> Ship:
    """Valid ship with a consistent rating; any field can be overridden."""
    values: dict[str, Any] = {
        "id": 1,
        "name": "Orion",
        "planet": "Mars",
        "ship_type": ShipType.TRANSPORT,
        "prod_date": datetime(2990, 6, 15, tzinfo=timezone.utc),
        "is_used": False,
        "speed": 0.5,
        "crew_size": 100,
    }
    values.update(overrides)
    if "rating" not in values:
        values["rating"] = compute_rating(
            values["speed"], values["is_used"], values["prod_date"].year
        )
    return Ship(**values)


@pytest.fixture()
def make_ship() -> Callable[..., Ship]:
    """Factory fixture for valid ships."""
    return build_ship
