"""
Dependency injection for FastAPI routes.

Key principle: the ship store is the only process-wide object; use cases
are cheap and built fresh per request around it.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends

from cosmoport.adapters.in_memory_ship_repository import InMemoryShipRepository
from cosmoport.infra.config import seed_ship_count
from cosmoport.infra.seed import generate_ships
from cosmoport.ports.ship_repository import ShipRepository
from cosmoport.use_cases.count_ships import CountShips
from cosmoport.use_cases.create_ship import CreateShip
from cosmoport.use_cases.delete_ship import DeleteShip
from cosmoport.use_cases.get_ship_by_id import GetShipById
from cosmoport.use_cases.search_ships import SearchShips
from cosmoport.use_cases.update_ship import UpdateShip

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_ship_repository() -> ShipRepository:
    """
    Provides the process-wide ship store.

    Built once on first use. When COSMOPORT_SEED_SHIPS is set, the store
    starts with that many deterministic demo ships.

    Returns:
        ShipRepository: Shared in-memory store
    """
    count = seed_ship_count()
    repository = InMemoryShipRepository(generate_ships(count))

    logger.info("Ship repository initialized", extra={"seeded_ships": count})
    return repository


def get_search_ships_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> SearchShips:
    return SearchShips(ship_repository=repository)


def get_count_ships_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> CountShips:
    return CountShips(ship_repository=repository)


def get_get_ship_by_id_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> GetShipById:
    return GetShipById(ship_repository=repository)


def get_create_ship_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> CreateShip:
    return CreateShip(ship_repository=repository)


def get_update_ship_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> UpdateShip:
    return UpdateShip(ship_repository=repository)


def get_delete_ship_use_case(
    repository: ShipRepository = Depends(get_ship_repository),
) -> DeleteShip:
    return DeleteShip(ship_repository=repository)
