from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

PRICE_TIERS = ["$", "$$", "$$$", "$$$$"]


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


class Restaurant(BaseModel):
    """A restaurant record as stored in ``restaurants.json``.

    Fields beyond the ones declared here are kept as-is.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    id: str
    name: str
    cuisine: str
    rating: float
    price_range: str = Field(..., alias="priceRange")
    latitude: float
    longitude: float
    address: str | None = None
    phone: str | None = None
    description: str | None = None
    opening_hours: str | None = Field(default=None, alias="openingHours")
    closing_hours: str | None = Field(default=None, alias="closingHours")
    operating_hours_display: str | None = Field(default=None, alias="operatingHoursDisplay")

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


class RankedRestaurant(Restaurant):
    distance: float = Field(..., description="Kilometers from the search origin")
    distance_display: str | None = Field(default=None, alias="distanceDisplay")


class SearchCriteria(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cuisine: str | None = None
    min_rating: float | None = Field(default=None, alias="minRating")
    price_range: str | None = Field(default=None, alias="priceRange")


class SearchFilters(SearchCriteria):
    min_rating: float | None = Field(default=None, ge=0.0, le=5.0, alias="minRating")


class RestaurantSearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    latitude: float | None = Field(default=None, ge=-90.0, le=90.0)
    longitude: float | None = Field(default=None, ge=-180.0, le=180.0)
    address: str | None = Field(default=None, description="Free-text area, neighborhood or zip code")
    filters: SearchFilters | None = None
    limit: int | None = Field(default=None, ge=1, le=50)


class RestaurantSearchResponse(BaseModel):
    restaurants: list[RankedRestaurant]
    origin: Coordinate
    total_candidates: int
