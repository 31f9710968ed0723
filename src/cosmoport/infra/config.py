from __future__ import annotations

import os


def seed_ship_count() -> int:
    raw = os.getenv("COSMOPORT_SEED_SHIPS")

    if not raw:
        return 0

    try:
        count = int(raw)
    except ValueError:
        raise RuntimeError("COSMOPORT_SEED_SHIPS must be an integer") from None

    if count < 0:
        raise RuntimeError("COSMOPORT_SEED_SHIPS must be >= 0")

    return count
