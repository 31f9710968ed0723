from __future__ import annotations

from cosmoport.domain.dates import epoch_millis, from_epoch_millis
from cosmoport.domain.ship import Paging, Ship, ShipFilters, ShipPatch
from cosmoport.entrypoints.http.dtos.ships import (
    ShipRequestDTO,
    ShipResponseDTO,
    ShipsPageQueryDTO,
    ShipsPageResponseDTO,
    ShipsSearchQueryDTO,
)
from cosmoport.use_cases.create_ship import CreateShipRequest
from cosmoport.use_cases.search_ships import SearchShipsRequest, SearchShipsResponse
from cosmoport.use_cases.update_ship import UpdateShipRequest


class ShipMapper:
    """Maps between REST DTOs and domain models for the ship catalog."""

    @staticmethod
    def to_domain_filters(dto: ShipsSearchQueryDTO) -> ShipFilters:
        return ShipFilters(
            name=dto.name,
            planet=dto.planet,
            ship_type=dto.ship_type,
            after=dto.after,
            before=dto.before,
            is_used=dto.is_used,
            min_speed=dto.min_speed,
            max_speed=dto.max_speed,
            min_crew_size=dto.min_crew_size,
            max_crew_size=dto.max_crew_size,
            min_rating=dto.min_rating,
            max_rating=dto.max_rating,
        )

    @staticmethod
    def to_search_request(dto: ShipsPageQueryDTO) -> SearchShipsRequest:
        """
        Builds the complete search request from query parameters.

        Args:
            dto: Filter, order and paging query parameters

        Returns:
            SearchShipsRequest: Domain request
        """
        return SearchShipsRequest(
            filters=ShipMapper.to_domain_filters(dto),
            order=dto.order,
            paging=Paging(page_number=dto.page_number, page_size=dto.page_size),
        )

    @staticmethod
    def to_create_request(dto: ShipRequestDTO) -> CreateShipRequest:
        """Epoch millis -> datetime at the boundary; missing fields stay None."""
        return CreateShipRequest(
            name=dto.name,
            planet=dto.planet,
            ship_type=dto.ship_type,
            prod_date=from_epoch_millis(dto.prod_date) if dto.prod_date is not None else None,
            is_used=dto.is_used,
            speed=dto.speed,
            crew_size=dto.crew_size,
        )

    @staticmethod
    def to_update_request(ship_id: int, dto: ShipRequestDTO) -> UpdateShipRequest:
        return UpdateShipRequest(
            ship_id=ship_id,
            patch=ShipPatch(
                name=dto.name,
                planet=dto.planet,
                ship_type=dto.ship_type,
                prod_date=from_epoch_millis(dto.prod_date) if dto.prod_date is not None else None,
                is_used=dto.is_used,
                speed=dto.speed,
                crew_size=dto.crew_size,
            ),
        )

    @staticmethod
    def to_ship_response(ship: Ship) -> ShipResponseDTO:
        """
        Converts a domain Ship to its REST representation.

        Handles datetime -> epoch millis and rounds speed for display;
        the stored speed keeps full precision.
        """
        return ShipResponseDTO(
            id=ship.id,
            name=ship.name,
            planet=ship.planet,
            ship_type=ship.ship_type,
            prod_date=epoch_millis(ship.prod_date),
            is_used=ship.is_used,
            speed=round(ship.speed, 2),
            crew_size=ship.crew_size,
            rating=ship.rating,
        )

    @staticmethod
    def to_page_response(
        result: SearchShipsResponse,
        page_number: int,
        page_size: int,
    ) -> ShipsPageResponseDTO:
        return ShipsPageResponseDTO(
            ships=[ShipMapper.to_ship_response(ship) for ship in result.ships],
            total=result.total_count,
            page_number=page_number,
            page_size=page_size,
        )
