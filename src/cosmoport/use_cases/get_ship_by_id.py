"""Get ship by ID use case."""

from __future__ import annotations

from dataclasses import dataclass

from cosmoport.domain.errors import NotFoundError, ValidationError
from cosmoport.domain.ship import Ship
from cosmoport.ports.ship_repository import ShipRepository


def validate_ship_id(ship_id: int) -> None:
    """
    Ship ids are positive integers.

    Raises:
        ValidationError: If ship_id is not a positive integer
    """
    if isinstance(ship_id, bool) or not isinstance(ship_id, int) or ship_id <= 0:
        raise ValidationError(
            errors=[
                {
                    "field": "id",
                    "message": "Must be a positive integer",
                    "code": "INVALID_ID",
                }
            ]
        )


def load_ship(repository: ShipRepository, ship_id: int) -> Ship:
    """
    Validate the id and fetch the ship it addresses.

    Raises:
        ValidationError: If ship_id is not a positive integer
        NotFoundError: If no ship has this id
    """
    validate_ship_id(ship_id)

    ship = repository.find_by_id(ship_id)
    if ship is None:
        raise NotFoundError(resource="Ship", identifier=str(ship_id))

    return ship


@dataclass(frozen=True, slots=True)
class GetShipByIdRequest:
    """Request to get a ship by ID."""

    ship_id: int


@dataclass(frozen=True, slots=True)
class GetShipByIdResponse:
    """Response containing the requested ship."""

    ship: Ship


class GetShipById:
    """
    Use case for retrieving a single ship by ID.

    Responsibilities:
    - Validate ship_id (must be a positive integer)
    - Delegate to repository for data access
    - Raise NotFoundError if ship doesn't exist
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        """
        Initialize use case with dependencies.

        Args:
            ship_repository: Repository for ship data access
        """
        self._repository = ship_repository

    def execute(self, request: GetShipByIdRequest) -> GetShipByIdResponse:
        """
        Execute the get ship by ID use case.

        Args:
            request: Request containing ship_id

        Returns:
            GetShipByIdResponse with the ship

        Raises:
            ValidationError: If ship_id is not a positive integer
            NotFoundError: If ship with given ID doesn't exist
        """
        return GetShipByIdResponse(ship=load_ship(self._repository, request.ship_id))
