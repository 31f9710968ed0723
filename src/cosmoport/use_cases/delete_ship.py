from __future__ import annotations

import logging
from dataclasses import dataclass

from cosmoport.ports.ship_repository import ShipRepository
from cosmoport.use_cases.get_ship_by_id import load_ship

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeleteShipRequest:
    ship_id: int


class DeleteShip:
    """Remove a ship from the catalog. Removal is permanent."""

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: DeleteShipRequest) -> None:
        """
        Raises:
            ValidationError: If ship_id is not a positive integer
            NotFoundError: If no ship has this id
        """
        ship = load_ship(self._repository, request.ship_id)
        self._repository.delete(ship)

        logger.info("Ship deleted", extra={"ship_id": ship.id})
