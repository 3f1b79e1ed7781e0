# =============================================================================
# tests/test_item_routes.py - Public Endpoint Tests
# =============================================================================
# Tests for the root, version, health and item endpoints through the full
# FastAPI stack (middleware, dependencies, exception handlers).
# =============================================================================

import platform

from fastapi.testclient import TestClient

from items_api.shared.utils.constants import REQUEST_ID_HEADER


# =============================================================================
# Root, Version, Health
# =============================================================================

class TestInfoEndpoints:
    """Tests for the informational endpoints."""

    def test_root_message(self, client, settings):
        response = client.get("/")

        assert response.status_code == 200
        message = response.json()["message"]
        name, timestamp = message.split(" ")
        assert name == settings.APP_NAME
        assert timestamp.endswith("Z")
        assert "T" in timestamp

    def test_version(self, client, settings):
        response = client.get("/version")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == settings.APP_NAME
        assert data["version"] == settings.APP_VERSION
        assert data["python_version"] == platform.python_version()
        assert set(data) >= {"deploy_tag", "build_time", "branch", "commit"}

    def test_health_reports_item_count(self, client, store):
        store.insert("esgrove")

        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["num_items"] == 1

    def test_request_id_is_echoed(self, client):
        response = client.get("/", headers={REQUEST_ID_HEADER: "abc123"})

        assert response.headers[REQUEST_ID_HEADER] == "abc123"

    def test_request_id_is_generated(self, client):
        response = client.get("/")

        assert response.headers[REQUEST_ID_HEADER]


# =============================================================================
# Listing and Lookup
# =============================================================================

class TestListItems:
    """Tests for GET /items."""

    def test_empty_list(self, client):
        response = client.get("/items")

        assert response.status_code == 200
        assert response.json() == {"num_items": 0, "names": [], "items": []}

    def test_list_sorted_by_name(self, client, store):
        store.insert("pinecone")
        store.insert("acorn")

        data = client.get("/items").json()

        assert data["num_items"] == 2
        assert data["names"] == ["acorn", "pinecone"]
        assert [item["name"] for item in data["items"]] == ["acorn", "pinecone"]


class TestQueryItem:
    """Tests for GET /item?name=..."""

    def test_get_existing_item(self, client, store):
        created = store.insert("esgrove")

        response = client.get("/item", params={"name": "esgrove"})

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == created.id
        assert data["name"] == "esgrove"
        assert "created_at" in data

    def test_get_missing_item(self, client):
        response = client.get("/item", params={"name": "missing"})

        assert response.status_code == 404
        error = response.json()["error"]
        assert error["code"] == "NOT_FOUND"
        assert error["message"] == "Item with name 'missing' not found"

    def test_lookup_is_case_sensitive(self, client, store):
        store.insert("esgrove")

        response = client.get("/item", params={"name": "Esgrove"})

        assert response.status_code == 404

    def test_missing_query_parameter(self, client):
        response = client.get("/item")

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "UNPROCESSABLE_ENTITY"


# =============================================================================
# Creation
# =============================================================================

class TestCreateItem:
    """Tests for POST /items."""

    def test_create_assigns_id(self, client):
        response = client.post("/items", json={"name": "esgrove"})

        assert response.status_code == 201
        data = response.json()
        assert data["name"] == "esgrove"
        assert data["id"] == 1000

    def test_create_with_client_id(self, client):
        response = client.post("/items", json={"name": "esgrove", "id": 4242})

        assert response.status_code == 201
        assert response.json()["id"] == 4242

    def test_created_item_is_listed(self, client):
        client.post("/items", json={"name": "esgrove"})

        assert client.get("/items").json()["names"] == ["esgrove"]

    def test_duplicate_name_conflict(self, client):
        client.post("/items", json={"name": "esgrove"})

        response = client.post("/items", json={"name": "esgrove"})

        assert response.status_code == 409
        error = response.json()["error"]
        assert error["code"] == "CONFLICT"
        assert error["message"] == "Item already exists: esgrove"
        assert client.get("/items").json()["num_items"] == 1

    def test_duplicate_id_conflict(self, client):
        client.post("/items", json={"name": "esgrove", "id": 7})

        response = client.post("/items", json={"name": "pinecone", "id": 7})

        assert response.status_code == 409
        assert response.json()["error"]["details"] == {"id": 7}

    def test_negative_id_rejected(self, client):
        response = client.post("/items", json={"name": "esgrove", "id": -1})

        assert response.status_code == 422

    def test_blank_name_rejected(self, client):
        response = client.post("/items", json={"name": "   "})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    def test_malformed_json(self, client):
        response = client.post(
            "/items",
            content=b'{"name": "esgrove"',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST"

    def test_empty_json_body(self, client):
        response = client.post(
            "/items",
            content=b"",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "BAD_REQUEST"
        assert error["message"] == "Malformed JSON in request body"

    def test_blank_name_and_schema_errors_have_distinct_codes(self, client):
        blank = client.post("/items", json={"name": ""})
        mistyped = client.post("/items", json={"name": ["esgrove"]})

        assert blank.status_code == 400
        assert mistyped.status_code == 422
        assert blank.json()["error"]["code"] != mistyped.json()["error"]["code"]

    def test_missing_field(self, client):
        response = client.post("/items", json={"wrong": "test"})

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "UNPROCESSABLE_ENTITY"
        assert error["details"]["errors"][0]["loc"] == ["body", "name"]

    def test_missing_content_type(self, client):
        response = client.post("/items", content=b'{"name": "esgrove"}')

        assert response.status_code == 415
        assert response.json()["error"]["code"] == "UNSUPPORTED_MEDIA_TYPE"
        assert client.get("/items").json()["num_items"] == 0

    def test_wrong_content_type(self, client):
        response = client.post(
            "/items",
            content=b'{"name": "esgrove"}',
            headers={"Content-Type": "text/plain"},
        )

        assert response.status_code == 415

    def test_json_content_type_with_charset(self, client):
        response = client.post(
            "/items",
            content=b'{"name": "esgrove"}',
            headers={"Content-Type": "application/json; charset=utf-8"},
        )

        assert response.status_code == 201


# =============================================================================
# Framework Errors
# =============================================================================

class TestErrorResponses:
    """Errors raised outside the handlers use the same body shape."""

    def test_unknown_route(self, client):
        response = client.get("/does-not-exist")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_unexpected_error(self, app, store, monkeypatch):
        def broken():
            raise RuntimeError("boom")

        monkeypatch.setattr(store, "list", broken)
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/items")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "INTERNAL_ERROR"
        assert "boom" not in error["message"]
