from __future__ import annotations

from dataclasses import dataclass, field

from cosmoport.domain.ship import Paging, Ship, ShipFilters, ShipOrder
from cosmoport.domain.ship_query import filter_ships, get_page, sort_ships
from cosmoport.ports.ship_repository import ShipRepository


@dataclass(frozen=True, slots=True)
class SearchShipsRequest:
    filters: ShipFilters = field(default_factory=ShipFilters)
    order: ShipOrder | None = None
    paging: Paging = field(default_factory=Paging)


@dataclass(frozen=True, slots=True)
class SearchShipsResponse:
    ships: list[Ship]
    total_count: int  # Matching ships before paging


class SearchShips:
    """
    Ship catalog search with filters, ordering and pagination.

    Loads the full collection from the store once, then filters, sorts
    and pages it in memory.
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: SearchShipsRequest) -> SearchShipsResponse:
        """
        Execute catalog search.

        Args:
            request: Filters, optional sort order and paging

        Returns:
            Response containing the requested page and the total match count

        Raises:
            PagingValidationError: If paging parameters are invalid
            OutOfRangeError: If the page starts past the last match
        """
        request.paging.validate()

        matches = filter_ships(self._repository.find_all(), request.filters)
        ordered = sort_ships(matches, request.order)

        return SearchShipsResponse(
            ships=get_page(ordered, request.paging),
            total_count=len(matches),
        )
