"""
Test suite for the /rest/ships routes.

Routes run against a real in-memory store injected through
dependency_overrides, so requests exercise mapper, use case and
exception handlers together.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable
from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from cosmoport.adapters.in_memory_ship_repository import InMemoryShipRepository
from cosmoport.domain.dates import epoch_millis
from cosmoport.domain.ship import Ship, ShipType
from cosmoport.entrypoints.http.dependencies import (
    get_search_ships_use_case,
    get_ship_repository,
)
from cosmoport.entrypoints.http.exception_handlers import register_exception_handlers
from cosmoport.entrypoints.http.routes.ships import router
from cosmoport.use_cases.search_ships import SearchShipsResponse


def _millis(year: int) -> int:
    return epoch_millis(datetime(year, 1, 1, tzinfo=timezone.utc))


@pytest.fixture
def repository(make_ship: Callable[..., Ship]) -> InMemoryShipRepository:
    return InMemoryShipRepository(
        [
            make_ship(id=None, name="Orion", planet="Mars", ship_type=ShipType.TRANSPORT,
                      prod_date=datetime(2900, 1, 1, tzinfo=timezone.utc), speed=0.5),
            make_ship(id=None, name="Vega", planet="Earth", ship_type=ShipType.MILITARY,
                      prod_date=datetime(2950, 1, 1, tzinfo=timezone.utc), speed=0.25,
                      is_used=True),
            make_ship(id=None, name="Kestrel", planet="Mars", ship_type=ShipType.MERCHANT,
                      prod_date=datetime(3019, 1, 1, tzinfo=timezone.utc), speed=0.123456),
            make_ship(id=None, name="Icarus", planet="Titan", ship_type=ShipType.TRANSPORT,
                      prod_date=datetime(3000, 1, 1, tzinfo=timezone.utc), speed=0.75),
        ]
    )


@pytest.fixture
def app(repository: InMemoryShipRepository) -> FastAPI:
    """Create a test FastAPI app with ships router, exception handlers and a fresh store."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router, prefix="/rest")
    test_app.dependency_overrides[get_ship_repository] = lambda: repository
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def valid_body() -> dict:
    return {
        "name": "Nostromo",
        "planet": "LV-426",
        "ship_type": "MERCHANT",
        "prod_date": _millis(3019),
        "speed": 0.5,
        "crew_size": 7,
    }


# ==============================================================================
# GET /rest/ships
# ==============================================================================


def test_get_ships_default_page(client: TestClient) -> None:
    response = client.get("/rest/ships")

    assert response.status_code == 200
    data = response.json()
    assert [s["id"] for s in data["ships"]] == [1, 2, 3]
    assert data["total"] == 4
    assert data["page_number"] == 0
    assert data["page_size"] == 3


def test_get_ships_second_page(client: TestClient) -> None:
    response = client.get("/rest/ships", params={"page_number": 1})

    assert response.status_code == 200
    assert [s["id"] for s in response.json()["ships"]] == [4]


def test_get_ships_with_filters_and_order(client: TestClient) -> None:
    response = client.get(
        "/rest/ships",
        params={"planet": "Mars", "order": "SPEED", "page_size": 10},
    )

    assert response.status_code == 200
    assert [s["name"] for s in response.json()["ships"]] == ["Kestrel", "Orion"]


def test_get_ships_filters_by_type_and_used(client: TestClient) -> None:
    response = client.get("/rest/ships", params={"ship_type": "MILITARY", "is_used": "true"})

    assert [s["name"] for s in response.json()["ships"]] == ["Vega"]


def test_get_ships_before_keeps_later_ships(client: TestClient) -> None:
    """before drops ships produced earlier than the bound."""
    response = client.get("/rest/ships", params={"before": _millis(2950), "order": "DATE"})

    assert [s["name"] for s in response.json()["ships"]] == ["Vega", "Icarus", "Kestrel"]


def test_get_ships_response_shape(client: TestClient) -> None:
    response = client.get("/rest/ships", params={"name": "Kestrel"})

    ship = response.json()["ships"][0]
    assert ship == {
        "id": 3,
        "name": "Kestrel",
        "planet": "Mars",
        "ship_type": "MERCHANT",
        "prod_date": _millis(3019),
        "is_used": False,
        "speed": 0.12,
        "crew_size": 100,
        "rating": 9.88,
    }


def test_get_ships_page_past_end_returns_400(client: TestClient) -> None:
    response = client.get("/rest/ships", params={"page_number": 2})

    assert response.status_code == 400
    assert response.json()["code"] == "OUT_OF_RANGE"


def test_get_ships_invalid_order_returns_400(client: TestClient) -> None:
    response = client.get("/rest/ships", params={"order": "NAME"})

    assert response.status_code == 400
    data = response.json()
    assert data["code"] == "VALIDATION_ERROR"
    assert data["errors"][0]["field"] == "order"


def test_get_ships_zero_page_size_returns_400(client: TestClient) -> None:
    response = client.get("/rest/ships", params={"page_size": 0})

    assert response.status_code == 400
    assert response.json()["detail"] == "page_size must be > 0"


def test_get_ships_delegates_to_use_case(app: FastAPI, client: TestClient) -> None:
    mock_use_case = Mock()
    mock_use_case.execute.return_value = SearchShipsResponse(ships=[], total_count=0)
    app.dependency_overrides[get_search_ships_use_case] = lambda: mock_use_case

    response = client.get("/rest/ships", params={"name": "Orion", "page_size": 5})

    assert response.status_code == 200
    request = mock_use_case.execute.call_args.args[0]
    assert request.filters.name == "Orion"
    assert request.paging.page_size == 5
    assert request.order is None


# ==============================================================================
# GET /rest/ships/count
# ==============================================================================


def test_count_ships(client: TestClient) -> None:
    response = client.get("/rest/ships/count")

    assert response.status_code == 200
    assert response.json() == {"count": 4}


def test_count_ships_with_filter(client: TestClient) -> None:
    response = client.get("/rest/ships/count", params={"ship_type": "TRANSPORT"})

    assert response.json() == {"count": 2}


# ==============================================================================
# GET /rest/ships/{id}
# ==============================================================================


def test_get_ship_by_id(client: TestClient) -> None:
    response = client.get("/rest/ships/2")

    assert response.status_code == 200
    assert response.json()["name"] == "Vega"


def test_get_ship_not_found(client: TestClient) -> None:
    response = client.get("/rest/ships/99")

    assert response.status_code == 404
    assert response.json() == {
        "detail": "Ship with identifier '99' not found",
        "code": "NOT_FOUND",
    }


@pytest.mark.parametrize("ship_id", ["0", "-1", "abc"])
def test_get_ship_invalid_id(client: TestClient, ship_id: str) -> None:
    response = client.get(f"/rest/ships/{ship_id}")

    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"


# ==============================================================================
# POST /rest/ships
# ==============================================================================


def test_create_ship(client: TestClient, repository: InMemoryShipRepository, valid_body: dict) -> None:
    response = client.post("/rest/ships", json=valid_body)

    assert response.status_code == 200
    data = response.json()
    assert data["id"] == 5
    assert data["is_used"] is False
    assert data["rating"] == 40.0
    assert repository.find_by_id(5) is not None


def test_create_ship_ignores_supplied_rating(client: TestClient, valid_body: dict) -> None:
    response = client.post("/rest/ships", json={**valid_body, "rating": 99.0})

    assert response.json()["rating"] == 40.0


def test_create_ship_missing_field(
    client: TestClient, repository: InMemoryShipRepository, valid_body: dict
) -> None:
    del valid_body["crew_size"]

    response = client.post("/rest/ships", json=valid_body)

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "crew_size"
    assert len(repository.find_all()) == 4


def test_create_ship_year_out_of_range(client: TestClient, valid_body: dict) -> None:
    response = client.post("/rest/ships", json={**valid_body, "prod_date": _millis(3020)})

    assert response.status_code == 400
    assert response.json()["errors"][0]["code"] == "INVALID_DATE"


@pytest.mark.parametrize("prod_date", [10**17, -10**15])
def test_create_ship_unrepresentable_date_returns_400(
    client: TestClient, repository: InMemoryShipRepository, valid_body: dict, prod_date: int
) -> None:
    response = client.post("/rest/ships", json={**valid_body, "prod_date": prod_date})

    assert response.status_code == 400
    assert response.json()["errors"][0] == {
        "field": "prod_date",
        "message": "Not a representable date",
        "code": "INVALID_DATE",
    }
    assert len(repository.find_all()) == 4


def test_create_ship_unknown_type(client: TestClient, valid_body: dict) -> None:
    response = client.post("/rest/ships", json={**valid_body, "ship_type": "CRUISER"})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "ship_type"


# ==============================================================================
# POST /rest/ships/{id}
# ==============================================================================


def test_update_ship_partial(client: TestClient) -> None:
    before = client.get("/rest/ships/1").json()

    response = client.post("/rest/ships/1", json={"name": "Orion II"})

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Orion II"
    assert data["planet"] == before["planet"]
    assert data["rating"] == before["rating"]


def test_update_ship_is_atomic(client: TestClient) -> None:
    response = client.post("/rest/ships/1", json={"name": "Orion II", "speed": 0.991})

    assert response.status_code == 400
    assert client.get("/rest/ships/1").json()["name"] == "Orion"


@pytest.mark.parametrize("prod_date", [10**17, -10**15])
def test_update_ship_unrepresentable_date_returns_400(client: TestClient, prod_date: int) -> None:
    before = client.get("/rest/ships/1").json()

    response = client.post("/rest/ships/1", json={"name": "Orion II", "prod_date": prod_date})

    assert response.status_code == 400
    assert response.json()["errors"][0]["code"] == "INVALID_DATE"
    assert client.get("/rest/ships/1").json() == before


def test_update_ship_not_found(client: TestClient) -> None:
    response = client.post("/rest/ships/99", json={"name": "Ghost"})

    assert response.status_code == 404


# ==============================================================================
# DELETE /rest/ships/{id}
# ==============================================================================


def test_delete_ship(client: TestClient, repository: InMemoryShipRepository) -> None:
    response = client.delete("/rest/ships/2")

    assert response.status_code == 200
    assert repository.find_by_id(2) is None
    assert client.get("/rest/ships/2").status_code == 404


def test_delete_ship_not_found(client: TestClient) -> None:
    assert client.delete("/rest/ships/99").status_code == 404
