from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from cosmoport.domain.dates import year_of
from cosmoport.domain.rating import compute_rating
from cosmoport.domain.ship import Ship, ShipPatch
from cosmoport.ports.ship_repository import ShipRepository
from cosmoport.use_cases.get_ship_by_id import load_ship

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateShipRequest:
    ship_id: int
    patch: ShipPatch


@dataclass(frozen=True, slots=True)
class UpdateShipResponse:
    ship: Ship


class UpdateShip:
    """
    Partially update an existing ship.

    Validate-then-commit: the whole patch is checked before any field is
    merged, so a rejected update never reaches the store. The rating is
    recomputed from the merged speed, used flag and production date on
    every successful update.
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: UpdateShipRequest) -> UpdateShipResponse:
        """
        Raises:
            ValidationError: If the id or any supplied field is invalid
            NotFoundError: If no ship has this id
        """
        current = load_ship(self._repository, request.ship_id)
        request.patch.validate()

        merged = replace(current, **request.patch.changes())
        merged = replace(
            merged,
            rating=compute_rating(merged.speed, merged.is_used, year_of(merged.prod_date)),
        )
        saved = self._repository.save(merged)

        logger.info(
            "Ship updated",
            extra={"ship_id": saved.id, "fields": sorted(request.patch.changes())},
        )
        return UpdateShipResponse(ship=saved)
