from __future__ import annotations

from abc import ABC, abstractmethod

from cosmoport.domain.ship import Ship


class ShipRepository(ABC):
    """
    Port for ship record storage.

    The catalog treats the store as opaque: it only saves, looks up,
    scans and deletes whole records. Filtering, sorting and paging happen
    in the domain over the result of find_all().

    Contract:
        - save() assigns an id on first save and returns the stored record
        - find_by_id() returns None when the id is unknown
        - find_all() returns every record in a stable order
        - Implementations trust records are already validated
    """

    @abstractmethod
    def save(self, ship: Ship) -> Ship: ...

    @abstractmethod
    def find_by_id(self, ship_id: int) -> Ship | None: ...

    @abstractmethod
    def find_all(self) -> list[Ship]: ...

    @abstractmethod
    def delete(self, ship: Ship) -> None: ...
