from typing import Any

from fastapi import APIRouter, Depends

from cosmoport.entrypoints.http.dependencies import (
    get_count_ships_use_case,
    get_create_ship_use_case,
    get_delete_ship_use_case,
    get_get_ship_by_id_use_case,
    get_search_ships_use_case,
    get_update_ship_use_case,
)
from cosmoport.entrypoints.http.dtos.ships import (
    ShipRequestDTO,
    ShipResponseDTO,
    ShipsCountResponseDTO,
    ShipsPageQueryDTO,
    ShipsPageResponseDTO,
    ShipsSearchQueryDTO,
)
from cosmoport.entrypoints.http.error_responses import ErrorResponse
from cosmoport.entrypoints.http.mappers.ship_mapper import ShipMapper
from cosmoport.use_cases.count_ships import CountShips, CountShipsRequest
from cosmoport.use_cases.create_ship import CreateShip
from cosmoport.use_cases.delete_ship import DeleteShip, DeleteShipRequest
from cosmoport.use_cases.get_ship_by_id import GetShipById, GetShipByIdRequest
from cosmoport.use_cases.search_ships import SearchShips
from cosmoport.use_cases.update_ship import UpdateShip


router = APIRouter(tags=["Ships"])

_BAD_REQUEST: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid parameters"},
}
_NOT_FOUND: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Ship not found"},
}


@router.get(
    "/ships",
    response_model=ShipsPageResponseDTO,
    summary="Search ship catalog",
    description="""
    Search ships with optional filters, ordering and pagination.

    ## Filters
    - All filters use AND semantics
    - name/planet: case-sensitive substring match
    - Speed/crew/rating: inclusive ranges
    - after: drops ships produced later than the given epoch millis
    - before: drops ships produced earlier than the given epoch millis

    ## Pagination
    - Default page_size: 3
    - A page_number starting past the last match is an error
    """,
    responses=_BAD_REQUEST,
)
def get_ships(
    query: ShipsPageQueryDTO = Depends(),
    use_case: SearchShips = Depends(get_search_ships_use_case),
) -> ShipsPageResponseDTO:
    """Search ships endpoint following parse → execute → map → return pattern."""
    request = ShipMapper.to_search_request(query)

    result = use_case.execute(request)

    return ShipMapper.to_page_response(
        result=result,
        page_number=query.page_number,
        page_size=query.page_size,
    )


@router.get(
    "/ships/count",
    response_model=ShipsCountResponseDTO,
    summary="Count matching ships",
    responses=_BAD_REQUEST,
)
def count_ships(
    query: ShipsSearchQueryDTO = Depends(),
    use_case: CountShips = Depends(get_count_ships_use_case),
) -> ShipsCountResponseDTO:
    result = use_case.execute(CountShipsRequest(filters=ShipMapper.to_domain_filters(query)))
    return ShipsCountResponseDTO(count=result.count)


@router.post(
    "/ships",
    response_model=ShipResponseDTO,
    summary="Create a ship",
    responses=_BAD_REQUEST,
)
def create_ship(
    body: ShipRequestDTO,
    use_case: CreateShip = Depends(get_create_ship_use_case),
) -> ShipResponseDTO:
    result = use_case.execute(ShipMapper.to_create_request(body))
    return ShipMapper.to_ship_response(result.ship)


@router.get(
    "/ships/{ship_id}",
    response_model=ShipResponseDTO,
    summary="Get a ship by id",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def get_ship(
    ship_id: int,
    use_case: GetShipById = Depends(get_get_ship_by_id_use_case),
) -> ShipResponseDTO:
    result = use_case.execute(GetShipByIdRequest(ship_id=ship_id))
    return ShipMapper.to_ship_response(result.ship)


@router.post(
    "/ships/{ship_id}",
    response_model=ShipResponseDTO,
    summary="Update a ship",
    description="Partial update: only supplied fields change, then rating is recomputed.",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def update_ship(
    ship_id: int,
    body: ShipRequestDTO,
    use_case: UpdateShip = Depends(get_update_ship_use_case),
) -> ShipResponseDTO:
    result = use_case.execute(ShipMapper.to_update_request(ship_id, body))
    return ShipMapper.to_ship_response(result.ship)


@router.delete(
    "/ships/{ship_id}",
    summary="Delete a ship",
    responses={**_BAD_REQUEST, **_NOT_FOUND},
)
def delete_ship(
    ship_id: int,
    use_case: DeleteShip = Depends(get_delete_ship_use_case),
) -> None:
    use_case.execute(DeleteShipRequest(ship_id=ship_id))
