# tests/test_contacts_api.py
import sqlite3

from fastapi.testclient import TestClient

from contact_manager_api.app.core.db import MIGRATIONS, Database
from contact_manager_api.app.main import create_app

BASE = "/api/v1/contacts"


def test_list_starts_empty(client):
    response = client.get(f"{BASE}/")
    assert response.status_code == 200
    assert response.json() == []


def test_create_with_json(client):
    response = client.post(f"{BASE}/", json={"email": "a@x.com", "name": "Ann", "company": "Acme"})
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert "error" not in body
    assert body["data"]["id"] == 1
    assert body["data"]["company"] == "Acme"


def test_create_with_form_data(client):
    response = client.post(f"{BASE}/", data={"email": "a@x.com", "name": "Ann", "phone": ""})
    assert response.status_code == 201
    assert response.json()["data"]["phone"] is None


def test_create_validation_failure(client):
    response = client.post(f"{BASE}/", json={"email": "not-an-email", "name": "A"})
    assert response.status_code == 422
    assert response.json() == {
        "success": False,
        "error": "email: Invalid email address; name: Name must be at least 2 characters",
    }


def test_create_rejects_non_object_body(client):
    response = client.post(f"{BASE}/", content=b"[1, 2]", headers={"content-type": "application/json"})
    assert response.status_code == 422
    assert response.json()["success"] is False


def test_duplicate_email_is_conflict(client):
    client.post(f"{BASE}/", json={"email": "a@x.com", "name": "Ann"})
    response = client.post(f"{BASE}/", json={"email": "a@x.com", "name": "Ann"})
    assert response.status_code == 409
    assert response.json()["success"] is False


def test_get_count_and_missing(client):
    client.post(f"{BASE}/", json={"email": "a@x.com", "name": "Ann"})

    assert client.get(f"{BASE}/1").json()["email"] == "a@x.com"
    assert client.get(f"{BASE}/count").json() == {"count": 1}
    assert client.get(f"{BASE}/2").status_code == 404


def test_patch_and_delete_lifecycle(client):
    client.post(f"{BASE}/", json={"email": "a@x.com", "name": "Ann"})

    patched = client.patch(f"{BASE}/1", json={"phone": "555-1000"})
    assert patched.status_code == 200
    assert patched.json()["data"]["name"] == "Ann"
    assert patched.json()["data"]["phone"] == "555-1000"

    revision = client.get("/api/v1/views/revision", params={"path": "/contacts/1"}).json()
    assert revision["revision"] == 1
    assert revision["invalidated_at"] is not None

    deleted = client.delete(f"{BASE}/1")
    assert deleted.status_code == 200
    assert deleted.json() == {"success": True, "data": None}

    assert client.get(f"{BASE}/1").status_code == 404
    assert client.get(f"{BASE}/").json() == []
    assert client.delete(f"{BASE}/1").status_code == 404


def test_patch_with_empty_body_is_noop(client):
    created = client.post(f"{BASE}/", json={"email": "a@x.com", "name": "Ann"}).json()["data"]
    response = client.patch(f"{BASE}/1")
    assert response.status_code == 200
    assert response.json()["data"] == created


def test_view_revision_for_untouched_view(client):
    response = client.get("/api/v1/views/revision", params={"path": "/contacts"})
    assert response.json() == {"path": "/contacts", "revision": 0, "invalidated_at": None}


def test_health_reports_connected_database(client):
    response = client.get("/api/v1/health/")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["database"] == "connected"


def test_ids_beyond_store_range_are_rejected(client):
    too_big = 2**63
    assert client.get(f"{BASE}/{too_big}").status_code == 422
    assert client.patch(f"{BASE}/{too_big}", json={"name": "Ann"}).status_code == 422
    assert client.delete(f"{BASE}/{too_big}").status_code == 422
    assert client.delete(f"{BASE}/0").status_code == 422


def test_startup_applies_migrations(tmp_path):
    database = Database(str(tmp_path / "fresh.db"))
    with TestClient(create_app(database)) as test_client:
        assert test_client.get(f"{BASE}/count").json() == {"count": 0}

    conn = sqlite3.connect(database.path)
    try:
        versions = [row[0] for row in conn.execute("SELECT version FROM migrations ORDER BY version")]
    finally:
        conn.close()
    assert versions == [version for version, _ in MIGRATIONS]
