"""Location API routes."""
import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from db import get_db
from models.location import Location
from repositories.city_repository import get_city
from repositories.location_repository import (
    create_location as repo_create_location,
    delete_location as repo_delete_location,
    get_location as repo_get_location,
    list_locations as repo_list_locations,
    list_locations_by_city as repo_list_locations_by_city,
    update_location as repo_update_location,
)
from schemas.locations import (
    CityLocationsResponse,
    CityRef,
    LocationCreate,
    LocationResponse,
    LocationUpdate,
    MessageResponse,
)
from utils.errors import DataStoreError, NotFoundError, ValidationError, store_message
from utils.query_params import clean_search, parse_limit

LOG = logging.getLogger(__name__)

router = APIRouter(tags=["locations"])


def location_to_response(loc: Location) -> LocationResponse:
    """Build LocationResponse from model instance; City is null when not joined."""
    city = loc.city
    return LocationResponse(
        id=loc.id,
        Name=loc.name,
        Status=loc.status,
        City=CityRef(id=city.id, Name=city.name, Status=city.status) if city is not None else None,
        createdAt=loc.created_at,
        updatedAt=loc.updated_at,
    )


def _city_id_from(value: Any) -> str | None:
    """City id from either a plain id or the legacy nested City object."""
    if isinstance(value, dict):
        value = value.get("_id") or value.get("id")
    return value or None


def location_update_fields(body: LocationUpdate) -> dict[str, Any]:
    """Map the sent fields of a partial update to column names; City is remapped to city_id."""
    sent = body.model_fields_set
    fields: dict[str, Any] = {}
    if "Name" in sent:
        fields["name"] = body.Name
    if "Status" in sent:
        fields["status"] = body.Status
    if "cityId" in sent and body.cityId:
        fields["city_id"] = body.cityId
    city_id = _city_id_from(body.City) if "City" in sent else None
    if city_id:
        fields["city_id"] = city_id
    return fields


@router.get("/locations", response_model=list[LocationResponse])
def list_locations(
    keyword: str | None = None,
    limit: str | None = None,
    city: str | None = None,
    db: Session = Depends(get_db),
) -> list[LocationResponse]:
    """List locations ordered by name; optional keyword search, city filter and limit."""
    try:
        locations = repo_list_locations(
            db,
            keyword=clean_search(keyword),
            city_id=city or None,
            limit=parse_limit(limit),
        )
    except SQLAlchemyError as e:
        raise DataStoreError(store_message(e)) from e
    return [location_to_response(loc) for loc in locations]


@router.get("/locations/{location_id}", response_model=LocationResponse)
def get_location(location_id: str, db: Session = Depends(get_db)) -> LocationResponse:
    """Get one location by id."""
    try:
        loc = repo_get_location(db, location_id)
    except SQLAlchemyError as e:
        raise DataStoreError(store_message(e)) from e
    if loc is None:
        raise NotFoundError("Location not found")
    return location_to_response(loc)


@router.post("/locations", response_model=LocationResponse, status_code=status.HTTP_201_CREATED)
def create_location(body: LocationCreate, db: Session = Depends(get_db)) -> LocationResponse:
    """Create a location under an existing city."""
    if not body.City:
        raise ValidationError("City ID is required")
    try:
        loc = repo_create_location(
            db,
            name=body.Name,
            status=body.Status or "Active",
            city_id=body.City,
        )
    except SQLAlchemyError as e:
        raise ValidationError(store_message(e)) from e
    LOG.info("Created location %s in city %s", loc.id, loc.city_id)
    return location_to_response(loc)


@router.patch("/locations/{location_id}", response_model=LocationResponse)
def update_location(
    location_id: str,
    body: LocationUpdate,
    db: Session = Depends(get_db),
) -> LocationResponse:
    """Partially update a location. Sending City moves it to that city."""
    try:
        loc = repo_update_location(db, location_id, location_update_fields(body))
    except SQLAlchemyError as e:
        raise ValidationError(store_message(e)) from e
    if loc is None:
        raise NotFoundError("Location not found")
    LOG.info("Updated location %s", location_id)
    return location_to_response(loc)


@router.delete("/locations/{location_id}", response_model=MessageResponse)
def delete_location(location_id: str, db: Session = Depends(get_db)) -> MessageResponse:
    """Delete a location by id."""
    try:
        deleted = repo_delete_location(db, location_id)
    except SQLAlchemyError as e:
        raise DataStoreError(store_message(e)) from e
    if not deleted:
        raise NotFoundError("Location not found")
    LOG.info("Deleted location %s", location_id)
    return MessageResponse(message="Location deleted successfully")


@router.get("/cities/{city_id}/locations", response_model=CityLocationsResponse)
def list_locations_by_city(city_id: str, db: Session = Depends(get_db)) -> CityLocationsResponse:
    """List a city's locations, newest first. 404 only when the city itself is unknown."""
    try:
        if get_city(db, city_id) is None:
            raise NotFoundError("City not found")
        locations = repo_list_locations_by_city(db, city_id)
    except SQLAlchemyError as e:
        raise DataStoreError(store_message(e)) from e
    return CityLocationsResponse(
        count=len(locations),
        data=[location_to_response(loc) for loc in locations],
    )
