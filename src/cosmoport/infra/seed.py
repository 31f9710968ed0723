"""
Deterministic demo data for the in-memory ship store.

Features:
- Deterministic: fixed seed -> same catalog every run
- Every generated ship passes validation and carries its computed rating
"""

from __future__ import annotations

import random
from datetime import datetime, timezone

from cosmoport.domain.rating import compute_rating
from cosmoport.domain.ship import Ship, ShipType
from cosmoport.domain.validation import MAX_PROD_YEAR, MIN_PROD_YEAR


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42

NAME_PREFIXES = ["Orion", "Vega", "Nostromo", "Serenity", "Hermes", "Icarus", "Kestrel"]
NAME_SUFFIXES = ["I", "II", "III", "Prime", "Mk4", "Explorer", "Runner"]

PLANETS = ["Earth", "Mars", "Europa", "Titan", "Ganymede", "Kepler-22b", "Proxima b"]


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_ship(rng: random.Random) -> Ship:
    """Generate a single random, valid ship without an id."""
    name = f"{rng.choice(NAME_PREFIXES)} {rng.choice(NAME_SUFFIXES)}"
    planet = rng.choice(PLANETS)
    ship_type = rng.choice(list(ShipType))

    # Production year: weighted toward the last century
    year = rng.choices(
        [rng.randint(MIN_PROD_YEAR, 2918), rng.randint(2919, MAX_PROD_YEAR)],
        weights=[1, 3],
        k=1,
    )[0]
    prod_date = datetime(year, rng.randint(1, 12), rng.randint(1, 28), tzinfo=timezone.utc)

    is_used = rng.random() < 0.4
    speed = round(rng.uniform(0.01, 0.99), 2)
    crew_size = rng.randint(1, 9999)

    return Ship(
        id=None,
        name=name,
        planet=planet,
        ship_type=ship_type,
        prod_date=prod_date,
        is_used=is_used,
        speed=speed,
        crew_size=crew_size,
        rating=compute_rating(speed, is_used, year),
    )


def generate_ships(count: int, seed: int = RANDOM_SEED) -> list[Ship]:
    """
    Generate ``count`` ships.

    Args:
        count: Number of ships to generate
        seed: Random seed for deterministic results
    """
    rng = random.Random(seed)
    return [generate_ship(rng) for _ in range(count)]
