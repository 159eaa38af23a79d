"""
Integration tests for the animal registry HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from dockside.services.animal_store import AnimalStore
from dockside.web.app import create_app

REX = {"id": 1, "name": "Rex", "category": "dog", "weight": 12.5, "furColor": "brown"}
VISIT = {"id": 10, "animalId": 1, "date": "2024-05-01T10:00:00", "description": "checkup", "price": 40.0}


@pytest.fixture
def store():
    return AnimalStore()


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


class TestAnimalsEndpoints:
    def test_empty_list(self, client):
        resp = client.get("/animals")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_create_animal(self, client, store):
        resp = client.post("/animals", json=REX)
        assert resp.status_code == 201
        assert resp.headers["location"] == "/animals/1"
        assert resp.json() == REX
        assert store.get_animal(1).fur_color == "brown"

    def test_snake_case_body_accepted(self, client):
        body = {**REX, "fur_color": "black"}
        del body["furColor"]
        resp = client.post("/animals", json=body)
        assert resp.status_code == 201
        assert resp.json()["furColor"] == "black"

    def test_duplicate_animal_conflict(self, client):
        client.post("/animals", json=REX)
        resp = client.post("/animals", json=REX)
        assert resp.status_code == 409
        assert "error" in resp.json()

    def test_invalid_body_rejected(self, client):
        resp = client.post("/animals", json={"id": 2, "name": "NoCategory"})
        assert resp.status_code == 422

    def test_get_animal(self, client):
        client.post("/animals", json=REX)
        resp = client.get("/animals/1")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Rex"

    def test_get_missing_animal(self, client):
        resp = client.get("/animals/99")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Animal 99 not found"}

    def test_update_animal(self, client):
        client.post("/animals", json=REX)
        resp = client.put("/animals/1", json={"name": "Max", "category": "dog", "weight": 14, "furColor": "black"})
        assert resp.status_code == 204
        data = client.get("/animals/1").json()
        assert data["id"] == 1
        assert data["name"] == "Max"
        assert data["furColor"] == "black"

    def test_update_missing_animal(self, client):
        resp = client.put("/animals/5", json={"name": "Max", "category": "dog", "weight": 14})
        assert resp.status_code == 404

    def test_delete_animal(self, client):
        client.post("/animals", json=REX)
        resp = client.delete("/animals/1")
        assert resp.status_code == 200
        assert resp.json() == REX
        assert client.get("/animals/1").status_code == 404

    def test_delete_missing_animal(self, client):
        assert client.delete("/animals/1").status_code == 404


class TestVisitsEndpoints:
    def test_create_visit(self, client):
        resp = client.post("/visits", json=VISIT)
        assert resp.status_code == 201
        assert resp.headers["location"] == "/visits/10"
        assert resp.json()["animalId"] == 1

    def test_visits_for_animal(self, client):
        client.post("/visits", json=VISIT)
        client.post("/visits", json={**VISIT, "id": 11, "animalId": 2})
        client.post("/visits", json={**VISIT, "id": 12})

        resp = client.get("/animals/1/visits")
        assert resp.status_code == 200
        assert [v["id"] for v in resp.json()] == [10, 12]
        assert client.get("/animals/3/visits").json() == []
        assert len(client.get("/visits").json()) == 3

    def test_duplicate_visit_conflict(self, client):
        client.post("/visits", json=VISIT)
        assert client.post("/visits", json=VISIT).status_code == 409


class TestHealth:
    def test_health_counts(self, client):
        client.post("/animals", json=REX)
        client.post("/visits", json=VISIT)
        data = client.get("/health").json()
        assert data["status"] == "ok"
        assert data["animals"] == 1
        assert data["visits"] == 1
        assert "timestamp" in data


def test_apps_do_not_share_state():
    first = TestClient(create_app())
    second = TestClient(create_app())
    first.post("/animals", json=REX)
    assert second.get("/animals").json() == []
