from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from cosmoport.domain.dates import year_of
from cosmoport.domain.errors import ValidationError
from cosmoport.domain.rating import compute_rating
from cosmoport.domain.ship import Ship, ShipType, field_errors
from cosmoport.ports.ship_repository import ShipRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreateShipRequest:
    """Raw field values for a new ship. Everything except is_used is required."""

    name: str | None
    planet: str | None
    ship_type: ShipType | None
    prod_date: datetime | None
    speed: float | None
    crew_size: int | None
    is_used: bool | None = None


@dataclass(frozen=True, slots=True)
class CreateShipResponse:
    ship: Ship


class CreateShip:
    """
    Register a new ship in the catalog.

    All fields are validated together; the ship is saved only if every
    field passes. The rating is always computed here, never supplied.
    """

    def __init__(self, ship_repository: ShipRepository) -> None:
        self._repository = ship_repository

    def execute(self, request: CreateShipRequest) -> CreateShipResponse:
        """
        Raises:
            ValidationError: Listing every missing or invalid field
        """
        values = {
            "name": request.name,
            "planet": request.planet,
            "ship_type": request.ship_type,
            "prod_date": request.prod_date,
            "is_used": False if request.is_used is None else request.is_used,
            "speed": request.speed,
            "crew_size": request.crew_size,
        }

        errors = field_errors(values)
        if errors:
            raise ValidationError(errors=errors)

        ship = Ship(
            id=None,
            rating=compute_rating(
                values["speed"], values["is_used"], year_of(values["prod_date"])
            ),
            **values,
        )
        saved = self._repository.save(ship)

        logger.info("Ship created", extra={"ship_id": saved.id})
        return CreateShipResponse(ship=saved)
