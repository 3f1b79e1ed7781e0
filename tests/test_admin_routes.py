# =============================================================================
# tests/test_admin_routes.py - Admin Endpoint Tests
# =============================================================================
# Tests for the api-key gated admin routes, including the full
# create / list / remove lifecycle.
# =============================================================================

import pytest

from items_api.shared.utils.constants import API_KEY_HEADER
from items_api.shared.utils.security import SecurityUtils

ADMIN_PATHS = ["/admin/clear_items", "/admin/remove/esgrove"]


# =============================================================================
# Authentication
# =============================================================================

class TestAdminAuthentication:
    """Tests for the api-key header check."""

    @pytest.mark.parametrize("path", ADMIN_PATHS)
    def test_missing_key(self, client, path):
        response = client.delete(path)

        assert response.status_code == 401
        error = response.json()["error"]
        assert error["code"] == "AUTHENTICATION_ERROR"
        assert error["message"] == f"Missing {API_KEY_HEADER} header"

    @pytest.mark.parametrize("path", ADMIN_PATHS)
    def test_invalid_key(self, client, path):
        response = client.delete(path, headers={API_KEY_HEADER: "wrong-key"})

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid API key"

    def test_empty_key(self, client):
        response = client.delete("/admin/clear_items", headers={API_KEY_HEADER: ""})

        assert response.status_code == 401

    def test_unauthorized_remove_leaves_item(self, client, store):
        store.insert("esgrove")

        response = client.delete("/admin/remove/esgrove")

        assert response.status_code == 401
        assert store.get("esgrove") is not None

    def test_unauthorized_clear_leaves_items(self, client, store):
        store.insert("esgrove")

        client.delete("/admin/clear_items", headers={API_KEY_HEADER: "wrong-key"})

        assert len(store) == 1

    def test_unknown_name_without_key_is_401(self, client):
        response = client.delete("/admin/remove/missing")

        assert response.status_code == 401


class TestAdminMethods:
    """Wrong HTTP verbs are rejected before the key is checked."""

    @pytest.mark.parametrize("path", ADMIN_PATHS)
    def test_get_without_key(self, client, path):
        response = client.get(path)

        assert response.status_code == 405
        assert response.json()["error"]["code"] == "METHOD_NOT_ALLOWED"
        assert "DELETE" in response.headers["allow"]

    @pytest.mark.parametrize("path", ADMIN_PATHS)
    def test_get_with_valid_key(self, client, admin_headers, path):
        response = client.get(path, headers=admin_headers)

        assert response.status_code == 405


# =============================================================================
# Admin Operations
# =============================================================================

class TestRemoveItem:
    """Tests for DELETE /admin/remove/{name}."""

    def test_remove_existing(self, client, store, admin_headers):
        created = store.insert("esgrove")

        response = client.delete("/admin/remove/esgrove", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["id"] == created.id
        assert store.get("esgrove") is None

    def test_remove_missing(self, client, admin_headers):
        response = client.delete("/admin/remove/missing", headers=admin_headers)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_remove_twice(self, client, store, admin_headers):
        store.insert("esgrove")
        client.delete("/admin/remove/esgrove", headers=admin_headers)

        response = client.delete("/admin/remove/esgrove", headers=admin_headers)

        assert response.status_code == 404


class TestClearItems:
    """Tests for DELETE /admin/clear_items."""

    def test_clear_reports_count(self, client, store, admin_headers):
        for name in ("a", "b", "c"):
            store.insert(name)

        response = client.delete("/admin/clear_items", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Removed 3 items", "num_removed": 3}
        assert len(store) == 0

    def test_list_empty_after_clear(self, client, admin_headers):
        for name in ("a", "b"):
            client.post("/items", json={"name": name})

        client.delete("/admin/clear_items", headers=admin_headers)

        assert client.get("/items").json() == {"num_items": 0, "names": [], "items": []}

    def test_clear_empty_store(self, client, admin_headers):
        response = client.delete("/admin/clear_items", headers=admin_headers)

        assert response.json()["num_removed"] == 0


# =============================================================================
# End to End
# =============================================================================

class TestItemLifecycle:
    """Create, read, conflict and remove through the public API."""

    def test_full_lifecycle(self, client, admin_headers):
        created = client.post("/items", json={"name": "esgrove"})
        assert created.status_code == 201
        item_id = created.json()["id"]

        listed = client.get("/items").json()
        assert listed["num_items"] == 1
        assert listed["names"] == ["esgrove"]

        fetched = client.get("/item", params={"name": "esgrove"})
        assert fetched.status_code == 200
        assert fetched.json()["id"] == item_id

        assert client.post("/items", json={"name": "esgrove"}).status_code == 409

        assert client.delete("/admin/remove/esgrove").status_code == 401
        removed = client.delete("/admin/remove/esgrove", headers=admin_headers)
        assert removed.status_code == 200

        assert client.get("/item", params={"name": "esgrove"}).status_code == 404

        recreated = client.post("/items", json={"name": "esgrove"})
        assert recreated.status_code == 201
        assert recreated.json()["id"] != item_id


# =============================================================================
# Key Helpers
# =============================================================================

class TestSecurityUtils:
    """Tests for the api-key helpers."""

    def test_verify_api_key(self):
        assert SecurityUtils.verify_api_key("secret", "secret")
        assert not SecurityUtils.verify_api_key("Secret", "secret")
        assert not SecurityUtils.verify_api_key(None, "secret")

    def test_mask_api_key(self):
        assert SecurityUtils.mask_api_key("items-api-key") == "ite***"
        assert SecurityUtils.mask_api_key("ab") == "**"
