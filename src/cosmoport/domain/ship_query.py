"""
Catalog query engine: filter, sort and page a materialized ship collection.

Every function is a pure transformation over the snapshot it is given.
"""

from __future__ import annotations

from operator import attrgetter
from typing import Any, Callable, Sequence

from cosmoport.domain.dates import epoch_millis
from cosmoport.domain.errors import OutOfRangeError
from cosmoport.domain.ship import Paging, Ship, ShipFilters, ShipOrder

_SORT_KEYS: dict[ShipOrder, Callable[[Ship], Any]] = {
    ShipOrder.ID: attrgetter("id"),
    ShipOrder.SPEED: attrgetter("speed"),
    ShipOrder.DATE: attrgetter("prod_date"),
    ShipOrder.RATING: attrgetter("rating"),
}


def matches(ship: Ship, filters: ShipFilters) -> bool:
    if filters.name is not None and filters.name not in ship.name:
        return False
    if filters.planet is not None and filters.planet not in ship.planet:
        return False
    if filters.ship_type is not None and ship.ship_type != filters.ship_type:
        return False
    # Inverted date bounds: "after" caps the date from above, "before" from below
    if filters.after is not None and epoch_millis(ship.prod_date) > filters.after:
        return False
    if filters.before is not None and epoch_millis(ship.prod_date) < filters.before:
        return False
    if filters.is_used is not None and ship.is_used != filters.is_used:
        return False
    if filters.min_speed is not None and ship.speed < filters.min_speed:
        return False
    if filters.max_speed is not None and ship.speed > filters.max_speed:
        return False
    if filters.min_crew_size is not None and ship.crew_size < filters.min_crew_size:
        return False
    if filters.max_crew_size is not None and ship.crew_size > filters.max_crew_size:
        return False
    if filters.min_rating is not None and ship.rating < filters.min_rating:
        return False
    if filters.max_rating is not None and ship.rating > filters.max_rating:
        return False
    return True


def filter_ships(ships: Sequence[Ship], filters: ShipFilters) -> list[Ship]:
    """Ships satisfying every supplied predicate, in their original order."""
    return [ship for ship in ships if matches(ship, filters)]


def sort_ships(ships: Sequence[Ship], order: ShipOrder | None) -> list[Ship]:
    """
    Sort ascending by the field behind ``order``.

    The sort is stable; with no order the input sequence is returned as is.
    """
    if order is None:
        return list(ships)
    return sorted(ships, key=_SORT_KEYS[order])


def get_page(ships: Sequence[Ship], paging: Paging) -> list[Ship]:
    """
    Slice ``[start, min(start + size, len))`` out of the ships.

    A start exactly at the end yields an empty page.

    Raises:
        OutOfRangeError: If the page starts past the end of the sequence
    """
    start = paging.start
    if start > len(ships):
        raise OutOfRangeError(start=start, size=len(ships))

    end = min(start + paging.page_size, len(ships))
    return list(ships[start:end])
