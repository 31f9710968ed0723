from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from cosmoport.domain.ship import Ship
from cosmoport.ports.ship_repository import ShipRepository


class InMemoryShipRepository(ShipRepository):
    """
    Canonical contract implementation for tests and the dev server.

    - Stores ships in insertion order
    - Assigns sequential ids starting at 1 on first save
    - Re-saving a ship with a known id replaces it in place
    """

    def __init__(self, ships: Iterable[Ship] = ()) -> None:
        self._ships: dict[int, Ship] = {}
        self._next_id = 1
        for ship in ships:
            self.save(ship)

    def save(self, ship: Ship) -> Ship:
        if ship.id is None:
            ship = replace(ship, id=self._next_id)
        self._next_id = max(self._next_id, ship.id + 1)
        self._ships[ship.id] = ship
        return ship

    def find_by_id(self, ship_id: int) -> Ship | None:
        return self._ships.get(ship_id)

    def find_all(self) -> list[Ship]:
        return list(self._ships.values())

    def delete(self, ship: Ship) -> None:
        # Deleting an unknown ship is a no-op
        if ship.id is not None:
            self._ships.pop(ship.id, None)
