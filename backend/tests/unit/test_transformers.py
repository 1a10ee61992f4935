"""Unit tests: model -> response transformers."""
from datetime import datetime, timezone

import pytest

from api.locations import location_to_response, location_update_fields
from api.templates import template_to_response
from models.city import City
from models.location import Location
from models.template import Template
from schemas.locations import LocationUpdate

pytestmark = pytest.mark.unit

NOW = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_location_with_city_projects_city():
    """City is projected to {_id, Name, Status} and id is renamed to _id."""
    city = City(id="city-1", name="Springfield", status="Active")
    loc = Location(id="loc-1", name="Main St", status="Active", city_id="city-1", created_at=NOW, updated_at=NOW)
    loc.city = city
    data = location_to_response(loc).model_dump(by_alias=True)
    assert data["_id"] == "loc-1"
    assert data["Name"] == "Main St"
    assert data["City"] == {"_id": "city-1", "Name": "Springfield", "Status": "Active"}
    assert data["createdAt"] == NOW


def test_location_without_city_is_null():
    """A location whose city is gone transforms with City = None."""
    loc = Location(id="loc-2", name="Orphan", status="Inactive", city_id=None, created_at=NOW, updated_at=NOW)
    data = location_to_response(loc).model_dump(by_alias=True)
    assert data["City"] is None
    assert data["Status"] == "Inactive"


def test_template_transform_renames_id_and_created_by():
    """Template id becomes _id and created_by becomes createdBy."""
    tpl = Template(
        id="tpl-1",
        name="Welcome",
        type="email",
        subject="Hi",
        body="Hello {{name}}",
        description="",
        status="Active",
        created_by="system",
        created_at=NOW,
        updated_at=NOW,
    )
    data = template_to_response(tpl).model_dump(by_alias=True)
    assert data["_id"] == "tpl-1"
    assert data["createdBy"] == "system"
    assert "id" not in data
    assert set(data) == {
        "_id", "name", "type", "subject", "body", "description",
        "createdBy", "status", "createdAt", "updatedAt",
    }


def test_update_fields_remap_city_and_drop_identity():
    """City (plain or nested) maps to city_id; identity and timestamp keys are ignored."""
    body = LocationUpdate.model_validate(
        {"_id": "x", "id": "x", "createdAt": "2020-01-01", "Name": "New", "City": "city-2"}
    )
    assert location_update_fields(body) == {"name": "New", "city_id": "city-2"}
    nested = LocationUpdate.model_validate({"City": {"_id": "city-3", "Name": "Other"}})
    assert location_update_fields(nested) == {"city_id": "city-3"}
    assert location_update_fields(LocationUpdate.model_validate({})) == {}
