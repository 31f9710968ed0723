from __future__ import annotations

from dataclasses import dataclass, field

from cosmoport.domain.ship import ShipFilters
from cosmoport.domain.ship_query import filter_ships
from cosmoport.ports.ship_repository import ShipRepository


@dataclass(frozen=True, slots=True)
class CountShipsRequest:
    filters: ShipFilters = field(default_factory=ShipFilters)


@dataclass(frozen=True, slots=True)
class CountShipsResponse:
    count: int


class CountShips:
    """Number of ships matching the filters, ignoring order and paging."""

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: CountShipsRequest) -> CountShipsResponse:
        matches = filter_ships(self._repository.find_all(), request.filters)
        return CountShipsResponse(count=len(matches))
