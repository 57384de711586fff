import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from mongorest.api.resources import get_backend, get_resources, parse_id
from mongorest.main import app
from tests.conftest import make_resource


@pytest.fixture
def client(backend):
    resources = {
        "widgets": make_resource("widgets"),
        "users": make_resource("people", id_field=["legacyId", "id"]),
    }
    app.dependency_overrides[get_backend] = lambda: backend
    app.dependency_overrides[get_resources] = lambda: resources
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_crud_round_trip(client):
    response = client.post("/api/v1/widgets", json={"name": "bolt", "size": 3})
    assert response.status_code == 201
    document_id = response.json()["id"]

    response = client.get(f"/api/v1/widgets/{document_id}")
    assert response.status_code == 200
    assert response.json() == {"_id": document_id, "name": "bolt", "size": 3}

    response = client.patch(f"/api/v1/widgets/{document_id}", json={"$push": {"tags": "new"}})
    assert response.json() == {"matched": 1, "modified": 1}

    response = client.put(f"/api/v1/widgets/{document_id}", json={"name": "nut"})
    assert response.json() == {"matched": 1, "modified": 1}
    assert client.get(f"/api/v1/widgets/{document_id}").json() == {"_id": document_id, "name": "nut"}

    response = client.delete(f"/api/v1/widgets/{document_id}")
    assert response.json() == {"deleted": 1}
    assert client.get(f"/api/v1/widgets/{document_id}").status_code == 404

def test_list_documents(client):
    client.post("/api/v1/widgets", json={"name": "a"})
    client.post("/api/v1/widgets", json={"name": "b"})

    response = client.get("/api/v1/widgets")

    assert response.status_code == 200
    assert [doc["name"] for doc in response.json()] == ["a", "b"]

def test_read_by_alternative_id_field(client):
    client.post("/api/v1/users", json={"legacyId": "u-1", "id": "9f", "name": "Ada"})

    assert client.get("/api/v1/users/u-1").json()["name"] == "Ada"
    assert client.get("/api/v1/users/9f").json()["name"] == "Ada"

def test_unknown_resource(client):
    assert client.get("/api/v1/gizmos").status_code == 404

def test_invalid_json_body(client):
    response = client.post("/api/v1/widgets", content="not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400

def test_non_object_json_body(client):
    document_id = client.post("/api/v1/widgets", json={"name": "bolt"}).json()["id"]

    assert client.patch(f"/api/v1/widgets/{document_id}", json=[1, 2]).status_code == 400
    assert client.put(f"/api/v1/widgets/{document_id}", json="nut").status_code == 400
    assert client.post("/api/v1/widgets", json=[{"name": "a"}]).status_code == 400
    assert client.get(f"/api/v1/widgets/{document_id}").json()["name"] == "bolt"

def test_root_lists_resources(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["resources"] == ["users", "widgets"]

def test_parse_id_only_converts_default_id_field():
    hex_id = "65f1c0a2b3d4e5f6a7b8c9d0"

    assert parse_id(make_resource("widgets"), hex_id) == ObjectId(hex_id)
    assert parse_id(make_resource("widgets"), "bolt") == "bolt"
    assert parse_id(make_resource("widgets", id_field="slug"), hex_id) == hex_id
