"""Tests for admin endpoints."""

from fastapi.testclient import TestClient

from itinerary_store.api.app import create_app
from itinerary_store.containers import AppContainer
from tests.conftest import InMemoryDocumentStore

HEADERS = {"X-Admin-Token": "admin-token"}


def _seed(store: InMemoryDocumentStore) -> None:
    store.put(
        "users/alice/itineraries/a",
        {"data": [{"day": 1}], "updatedAt": "2024-01-01T00:00:00.000Z"},
    )
    store.put(
        "users/bob/itineraries/c",
        {
            "data": [],
            "updatedAt": "2024-06-01T00:00:00.000Z",
            "metadata": {"title": "Summer"},
        },
    )


def test_admin_users_endpoint(
    container: AppContainer, store: InMemoryDocumentStore
) -> None:
    client = TestClient(create_app(container))
    _seed(store)

    response = client.get("/admin/users", headers=HEADERS)

    assert response.status_code == 200
    users = response.json()["users"]
    assert [user["username"] for user in users] == ["bob", "alice"]
    assert users[0]["itineraryCount"] == 1
    assert users[0]["itineraries"][0]["name"] == "Summer"


def test_admin_users_endpoint_reports_aggregation_failure(
    container: AppContainer, store: InMemoryDocumentStore
) -> None:
    client = TestClient(create_app(container))
    _seed(store)
    store.failing.add("query")

    response = client.get("/admin/users", headers=HEADERS)

    assert response.status_code == 502
    assert response.json() == {"detail": "Failed to list users"}


def test_admin_inspect_itinerary(
    container: AppContainer, store: InMemoryDocumentStore
) -> None:
    client = TestClient(create_app(container))
    _seed(store)

    response = client.get("/admin/users/alice/itineraries/a", headers=HEADERS)

    assert response.status_code == 200
    assert response.json() == {
        "username": "alice",
        "id": "a",
        "name": "a",
        "updatedAt": "2024-01-01T00:00:00.000Z",
        "data": [{"day": 1}],
    }


def test_admin_delete_user(container: AppContainer, store: InMemoryDocumentStore) -> None:
    client = TestClient(create_app(container))
    _seed(store)

    response = client.delete("/admin/users/alice", headers=HEADERS)

    assert response.status_code == 200
    assert sorted(store.documents) == ["users/bob/itineraries/c"]


def test_admin_delete_user_failure_keeps_data(
    container: AppContainer, store: InMemoryDocumentStore
) -> None:
    client = TestClient(create_app(container))
    _seed(store)
    store.failing.add("commit")

    response = client.delete("/admin/users/alice", headers=HEADERS)

    assert response.status_code == 502
    assert "users/alice/itineraries/a" in store.documents


def test_admin_delete_itinerary(
    container: AppContainer, store: InMemoryDocumentStore
) -> None:
    client = TestClient(create_app(container))
    _seed(store)

    response = client.delete("/admin/users/bob/itineraries/c", headers=HEADERS)
    listing = client.get("/admin/users", headers=HEADERS)

    assert response.status_code == 200
    assert [user["username"] for user in listing.json()["users"]] == ["alice"]
