"""
HTTP tests for the employee directory endpoints.

Each test runs the full application (lifespan included) against the
in-memory container from conftest.
"""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from src.main import create_app


@pytest.fixture
def client(container) -> Generator[TestClient, None, None]:
    app = create_app(container)
    with TestClient(app) as client:
        yield client


def add(client: TestClient, first: str, last: str, email: str) -> dict:
    response = client.post(
        "/api/employees",
        json={"firstName": first, "lastName": last, "email": email},
    )
    assert response.status_code == 200
    return response.json()


class TestListAndGet:
    """GET endpoints."""

    def test_empty_directory_lists_nothing(self, client):
        response = client.get("/api/employees")

        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_camel_case_fields(self, client):
        add(client, "Leslie", "Andrews", "leslie@luv2code.com")

        employees = client.get("/api/employees").json()

        assert employees == [{
            "id": 1,
            "firstName": "Leslie",
            "lastName": "Andrews",
            "email": "leslie@luv2code.com",
        }]

    def test_get_by_id(self, client):
        created = add(client, "Emma", "Baumgarten", "emma@luv2code.com")

        response = client.get(f"/api/employees/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_missing_is_404(self, client):
        response = client.get("/api/employees/99")

        assert response.status_code == 404
        assert response.json()["detail"] == "Employee id not found - 99"


class TestAdd:
    """POST always inserts."""

    def test_post_assigns_new_ids(self, client):
        first = add(client, "Avani", "Gupta", "avani@luv2code.com")
        second = add(client, "Yuri", "Petrov", "yuri@luv2code.com")

        assert first["id"] > 0
        assert second["id"] > 0
        assert first["id"] != second["id"]

    def test_post_ignores_supplied_id(self, client):
        existing = add(client, "Juan", "Vega", "juan@luv2code.com")

        response = client.post(
            "/api/employees",
            json={"id": existing["id"], "firstName": "Other", "lastName": "Person", "email": "o@luv2code.com"},
        )

        assert response.json()["id"] != existing["id"]
        assert len(client.get("/api/employees").json()) == 2

    def test_post_rejects_missing_fields(self, client):
        response = client.post("/api/employees", json={"firstName": "Nobody"})

        assert response.status_code == 422


class TestUpdate:
    """PUT merges by id."""

    def test_put_updates_existing(self, client):
        created = add(client, "Leslie", "Andrews", "leslie@luv2code.com")

        response = client.put(
            "/api/employees",
            json={**created, "email": "leslie.andrews@luv2code.com"},
        )

        assert response.status_code == 200
        assert response.json()["id"] == created["id"]
        fetched = client.get(f"/api/employees/{created['id']}").json()
        assert fetched["email"] == "leslie.andrews@luv2code.com"

    def test_put_without_id_inserts(self, client):
        response = client.put(
            "/api/employees",
            json={"firstName": "Emma", "lastName": "Baumgarten", "email": "emma@luv2code.com"},
        )

        assert response.status_code == 200
        assert response.json()["id"] is not None


class TestDelete:
    """DELETE removes or 404s."""

    def test_delete_returns_message_and_removes(self, client):
        created = add(client, "Yuri", "Petrov", "yuri@luv2code.com")

        response = client.delete(f"/api/employees/{created['id']}")

        assert response.status_code == 200
        assert response.json() == f"Deleted employee id - {created['id']}"
        assert client.get(f"/api/employees/{created['id']}").status_code == 404

    def test_delete_missing_is_404(self, client):
        response = client.delete("/api/employees/12")

        assert response.status_code == 404
        assert response.json()["detail"] == "Employee id not found - 12"
