"""
Tests for the v1 HTTP routes.

Each test runs against an app built by ``create_app`` around a fresh
seeded store, so state never leaks between tests.
"""

import logging

from fastapi.testclient import TestClient

from employee_api.app.core.config import Settings
from employee_api.app.main import create_app
from employee_api.app.services.employee_store import EmployeeStore

from .conftest import SEED_COUNT

BASE = "/api/v1/employees"


class TestListAndGet:

    def test_list_returns_seeded_employees(self, client):
        response = client.get(f"{BASE}/")
        assert response.status_code == 200
        body = response.json()
        assert len(body) == SEED_COUNT
        assert body[0] == {"id": "1", "name": "User1", "department": "ENG"}

    def test_get_existing_employee(self, client):
        response = client.get(f"{BASE}/3")
        assert response.status_code == 200
        assert response.json() == {"id": "3", "name": "User3", "department": "ENG"}

    def test_get_unknown_employee_is_404(self, client):
        response = client.get(f"{BASE}/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Employee not found"

    def test_non_numeric_id_is_logged_not_rejected(self, client, caplog):
        with caplog.at_level(logging.WARNING):
            response = client.get(f"{BASE}/abc")
        assert response.status_code == 404
        assert "Non-numeric employee id: abc" in caplog.text


class TestCreate:

    def test_create_then_get(self, client, store):
        payload = {"id": "6", "name": "Alice", "department": "ENG"}
        response = client.post(f"{BASE}/", json=payload)
        assert response.status_code == 200
        assert response.json() == payload

        assert client.get(f"{BASE}/6").json() == payload
        assert len(store) == SEED_COUNT + 1

    def test_create_accepts_dept_alias(self, client):
        response = client.post(f"{BASE}/", json={"id": "7", "name": "Dana", "dept": "HR"})
        assert response.status_code == 200
        assert response.json() == {"id": "7", "name": "Dana", "department": "HR"}

    def test_duplicate_id_is_409(self, client):
        response = client.post(f"{BASE}/", json={"id": "1", "name": "Eve", "department": "OPS"})
        assert response.status_code == 409
        assert client.get(f"{BASE}/1").json()["name"] == "User1"

    def test_missing_field_is_422(self, client, store):
        response = client.post(f"{BASE}/", json={"id": "8", "name": "Frank"})
        assert response.status_code == 422
        assert "8" not in store


class TestUpdate:

    def test_update_existing_employee(self, client):
        response = client.put(f"{BASE}/1", json={"name": "Bob", "department": "OPS"})
        assert response.status_code == 200
        assert response.json() == {"id": "1", "name": "Bob", "department": "OPS"}
        assert client.get(f"{BASE}/1").json() == {"id": "1", "name": "Bob", "department": "OPS"}

    def test_update_ignores_id_in_body(self, client):
        response = client.put(f"{BASE}/2", json={"id": "77", "name": "Bob", "department": "OPS"})
        assert response.status_code == 200
        assert response.json()["id"] == "2"
        assert client.get(f"{BASE}/77").status_code == 404

    def test_update_accepts_dept_alias(self, client):
        response = client.put(f"{BASE}/1", json={"name": "Ada", "dept": "HR"})
        assert response.status_code == 200
        assert response.json() == {"id": "1", "name": "Ada", "department": "HR"}
        assert client.get(f"{BASE}/1").json()["department"] == "HR"

    def test_update_unknown_employee_is_404(self, client):
        response = client.put(f"{BASE}/999", json={"name": "Bob", "department": "OPS"})
        assert response.status_code == 404
        assert len(client.get(f"{BASE}/").json()) == SEED_COUNT


class TestDelete:

    def test_delete_twice(self, client):
        first = client.delete(f"{BASE}/2")
        assert first.status_code == 204
        assert first.content == b""

        assert client.delete(f"{BASE}/2").status_code == 404
        assert client.get(f"{BASE}/2").status_code == 404


class TestInfo:

    def test_info_reports_settings_and_count(self, client):
        response = client.get("/api/v1/info/")
        assert response.status_code == 200
        assert response.json() == {
            "project": "Test Directory",
            "version": "9.9.9",
            "employees": SEED_COUNT,
        }


def test_create_app_seeds_store_from_settings():
    app = create_app(Settings(seed_count=3, seed_department="OPS"))
    assert isinstance(app.state.employee_store, EmployeeStore)
    with TestClient(app) as client:
        body = client.get(f"{BASE}/").json()
    assert [e["id"] for e in body] == ["1", "2", "3"]
    assert {e["department"] for e in body} == {"OPS"}
