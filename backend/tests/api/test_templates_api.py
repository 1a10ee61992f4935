"""API tests: templates endpoints."""
import pytest

from repositories.template_repository import create_template

pytestmark = pytest.mark.api

TEMPLATE = {
    "name": "Welcome Email",
    "type": "email",
    "subject": "Welcome aboard",
    "body": "Hello {{name}}, thanks for joining.",
}


def _create(client, **overrides):
    return client.post("/api/templates", json={**TEMPLATE, **overrides})


def test_create_template_success(client):
    """POST /api/templates returns 201 with defaults and createdBy=system."""
    r = _create(client)
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    data = body["data"]
    assert data["_id"]
    assert data["name"] == "Welcome Email"
    assert data["description"] == ""
    assert data["status"] == "Active"
    assert data["createdBy"] == "system"


def test_create_template_uses_authenticated_user(client):
    """createdBy comes from the X-User-Id identity when present."""
    r = client.post("/api/templates", json=TEMPLATE, headers={"X-User-Id": "user-42"})
    assert r.status_code == 201
    assert r.json()["data"]["createdBy"] == "user-42"


@pytest.mark.parametrize("missing", ["name", "type", "body"])
def test_create_template_missing_required_400(client, missing):
    """Missing name, type or body returns 400 and creates nothing."""
    payload = {k: v for k, v in TEMPLATE.items() if k != missing}
    r = client.post("/api/templates", json=payload)
    assert r.status_code == 400
    assert r.json()["message"] == "name, type and body are required"
    assert client.get("/api/templates").json()["total"] == 0


def test_create_template_empty_body_400(client):
    """An empty body string counts as missing."""
    r = _create(client, body="")
    assert r.status_code == 400


def test_create_duplicate_name_409(client):
    """Second create with the same name returns 409."""
    assert _create(client).status_code == 201
    r = _create(client, body="Different body")
    assert r.status_code == 409
    assert r.json()["message"] == "Template with this name already exists"
    assert client.get("/api/templates").json()["total"] == 1


def test_list_templates_pagination(client, db_session):
    """total, currentPage and totalPages reflect the whole result set."""
    for i in range(7):
        create_template(db_session, name=f"T{i}", template_type="email", body="b")
    r = client.get("/api/templates", params={"page": "2", "limit": "3"})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["total"] == 7
    assert body["currentPage"] == 2
    assert body["totalPages"] == 3
    assert len(body["data"]) == 3


def test_list_templates_page_beyond_end(client, db_session):
    """A page past the end returns no data but an accurate total."""
    for i in range(3):
        create_template(db_session, name=f"P{i}", template_type="email", body="b")
    body = client.get("/api/templates", params={"page": "5", "limit": "2"}).json()
    assert body["data"] == []
    assert body["total"] == 3
    assert body["totalPages"] == 2
    assert body["currentPage"] == 5


def test_list_templates_invalid_pagination_defaults(client, db_session):
    """page=0&limit=-5 behaves like page=1&limit=10."""
    for i in range(12):
        create_template(db_session, name=f"D{i}", template_type="email", body="b")
    body = client.get("/api/templates", params={"page": "0", "limit": "-5"}).json()
    assert body["currentPage"] == 1
    assert len(body["data"]) == 10
    assert body["totalPages"] == 2


def test_list_templates_empty(client):
    """No templates: total 0 and totalPages 0."""
    body = client.get("/api/templates").json()
    assert body == {"success": True, "total": 0, "currentPage": 1, "totalPages": 0, "data": []}


def test_list_templates_search_and_type(client, db_session):
    """search matches name/body/subject case-insensitively; type is exact."""
    create_template(db_session, name="Promo", template_type="email", body="Summer SALE")
    create_template(db_session, name="Sale Alert", template_type="sms", body="Hurry")
    create_template(db_session, name="Invoice", template_type="email", body="Due", subject="on sale items")
    create_template(db_session, name="Plain", template_type="email", body="Nothing")

    data = client.get("/api/templates", params={"search": " sale "}).json()["data"]
    assert {t["name"] for t in data} == {"Promo", "Sale Alert", "Invoice"}
    for t in data:
        assert any("sale" in t[field].lower() for field in ("name", "body", "subject"))

    data = client.get("/api/templates", params={"search": "sale", "type": "email"}).json()["data"]
    assert {t["name"] for t in data} == {"Promo", "Invoice"}

    assert client.get("/api/templates", params={"search": "   "}).json()["total"] == 4


def test_get_template_and_404(client):
    """GET /api/templates/{id} returns the envelope or 404."""
    tpl_id = _create(client).json()["data"]["_id"]
    r = client.get(f"/api/templates/{tpl_id}")
    assert r.status_code == 200
    assert r.json()["data"]["_id"] == tpl_id
    r = client.get("/api/templates/missing")
    assert r.status_code == 404
    assert r.json()["message"] == "Template not found"


def test_update_template(client):
    """PATCH updates given fields and never identity or createdAt."""
    created = _create(client).json()["data"]
    r = client.patch(
        f"/api/templates/{created['_id']}",
        json={"_id": "forged", "createdAt": "2000-01-01T00:00:00Z", "status": "Inactive", "body": "New"},
    )
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["_id"] == created["_id"]
    assert data["createdAt"] == created["createdAt"]
    assert data["status"] == "Inactive"
    assert data["body"] == "New"
    assert data["name"] == created["name"]


def test_update_template_404(client):
    """PATCH on an unknown id returns 404."""
    r = client.patch("/api/templates/missing", json={"body": "x"})
    assert r.status_code == 404


def test_delete_template(client):
    """DELETE returns success, then 404 on repeat."""
    tpl_id = _create(client).json()["data"]["_id"]
    r = client.delete(f"/api/templates/{tpl_id}")
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Template deleted"}
    assert client.delete(f"/api/templates/{tpl_id}").status_code == 404


def test_list_templates_huge_page_falls_back(client, db_session):
    """An out-of-range page number is treated as absent instead of failing."""
    create_template(db_session, name="Only", template_type="email", body="b")
    r = client.get("/api/templates", params={"page": "99999999999999999999", "limit": "99999999999999999999"})
    assert r.status_code == 200
    body = r.json()
    assert body["currentPage"] == 1
    assert body["total"] == 1
    assert len(body["data"]) == 1


def test_update_template_created_by(client):
    """createdBy is an ordinary updatable field."""
    tpl_id = _create(client).json()["data"]["_id"]
    r = client.patch(f"/api/templates/{tpl_id}", json={"createdBy": "alice"})
    assert r.status_code == 200
    assert r.json()["data"]["createdBy"] == "alice"
    assert client.get(f"/api/templates/{tpl_id}").json()["data"]["createdBy"] == "alice"
