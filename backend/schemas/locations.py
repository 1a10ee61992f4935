"""Pydantic schemas for location API."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class LocationCreate(BaseModel):
    """Payload for creating a location. City is the parent city id."""

    Name: str = Field(..., min_length=1)
    Status: str | None = None
    City: str | None = None


class LocationUpdate(BaseModel):
    """Partial update. id/_id/createdAt/updatedAt and other unknown keys are dropped.

    City may be a city id or the legacy nested object ({"_id": ...}).
    """

    Name: str | None = None
    Status: str | None = None
    City: str | dict[str, Any] | None = None
    cityId: str | None = None


class CityRef(BaseModel):
    """City projection embedded in a location."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    Name: str
    Status: str


class LocationResponse(BaseModel):
    """Location in list/detail responses."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    Name: str
    Status: str
    City: CityRef | None = None
    createdAt: datetime
    updatedAt: datetime


class CityLocationsResponse(BaseModel):
    """Response for GET /cities/{city_id}/locations."""

    success: bool = True
    count: int
    data: list[LocationResponse]


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
