from pydantic import BaseModel, ConfigDict, Field

from cosmoport.domain.ship import DEFAULT_PAGE_NUMBER, DEFAULT_PAGE_SIZE, ShipOrder, ShipType


class ShipResponseDTO(BaseModel):
    id: int
    name: str
    planet: str
    ship_type: ShipType
    prod_date: int = Field(description="Production date as epoch milliseconds")
    is_used: bool
    speed: float = Field(description="Speed rounded to 2 decimal places")
    crew_size: int
    rating: float


class ShipsSearchQueryDTO(BaseModel):
    """Query parameters for searching and counting ships."""

    name: str | None = Field(
        default=None,
        description="Name contains this text (case-sensitive)",
        examples=["Orion"],
    )
    planet: str | None = Field(
        default=None,
        description="Planet contains this text (case-sensitive)",
        examples=["Mars"],
    )
    ship_type: ShipType | None = Field(
        default=None,
        description="Exact ship type",
    )
    after: int | None = Field(
        default=None,
        description="Epoch millis; ships produced later than this are excluded",
    )
    before: int | None = Field(
        default=None,
        description="Epoch millis; ships produced earlier than this are excluded",
    )
    is_used: bool | None = Field(default=None, description="Used flag")
    min_speed: float | None = Field(default=None, description="Minimum speed (inclusive)")
    max_speed: float | None = Field(default=None, description="Maximum speed (inclusive)")
    min_crew_size: int | None = Field(default=None, description="Minimum crew (inclusive)")
    max_crew_size: int | None = Field(default=None, description="Maximum crew (inclusive)")
    min_rating: float | None = Field(default=None, description="Minimum rating (inclusive)")
    max_rating: float | None = Field(default=None, description="Maximum rating (inclusive)")


class ShipsPageQueryDTO(ShipsSearchQueryDTO):
    """Search parameters plus ordering and paging."""

    order: ShipOrder | None = Field(
        default=None,
        description="Sort ascending by this field; unsorted when absent",
    )
    page_number: int = Field(
        default=DEFAULT_PAGE_NUMBER,
        description="Zero-based page index",
        examples=[0],
    )
    page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        description="Ships per page",
        examples=[3],
    )


class ShipsPageResponseDTO(BaseModel):
    ships: list[ShipResponseDTO]
    total: int
    page_number: int
    page_size: int


class ShipsCountResponseDTO(BaseModel):
    count: int


class ShipRequestDTO(BaseModel):
    """
    Body for creating or updating a ship.

    On create every field except is_used is required; on update only the
    supplied fields change. rating is derived and any supplied value is ignored.
    """

    name: str | None = None
    planet: str | None = None
    ship_type: ShipType | None = None
    prod_date: int | None = Field(default=None, description="Epoch milliseconds")
    is_used: bool | None = None
    speed: float | None = None
    crew_size: int | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Orion III",
                "planet": "Mars",
                "ship_type": "TRANSPORT",
                "prod_date": 32503680000000,
                "is_used": False,
                "speed": 0.5,
                "crew_size": 120,
            }
        }
    )
