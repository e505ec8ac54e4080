"""
Tests for the request-level error boundary.
"""

from typing import List

from fastapi.testclient import TestClient

from product_server.app.core.errors import SERVER_ERROR_HTML
from product_server.app.main import create_app
from product_server.app.schemas.product import Product
from product_server.app.services.product_store import ProductStore


class BrokenStore(ProductStore):
    """Store whose listing always fails."""

    def all(self) -> List[Product]:
        raise RuntimeError("store exploded")


class TestUnhandledErrors:
    """Unexpected exceptions become 500 responses."""

    def test_unexpected_error_is_server_error(self, app_settings):
        app = create_app(store=BrokenStore.seeded(), app_settings=app_settings)
        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get("/products")
            assert response.status_code == 500
            assert response.headers["content-type"].startswith("text/html")
            assert response.text == SERVER_ERROR_HTML

            # The failure is isolated to that request.
            assert client.get("/products/1001").status_code == 200

    def test_unexpected_error_is_logged(self, app_settings, caplog):
        app = create_app(store=BrokenStore.seeded(), app_settings=app_settings)
        with TestClient(app, raise_server_exceptions=False) as client:
            client.get("/products")
        assert "Unhandled error while serving GET /products" in caplog.text
        assert "store exploded" in caplog.text


class TestBodyErrors:
    """Body errors are logged and answered with JSON."""

    def test_bad_body_is_logged(self, client: TestClient, caplog):
        client.post("/products", content=b"[")
        assert "POST /products rejected" in caplog.text

    def test_error_payload_shape(self, client: TestClient):
        response = client.post("/products", content=b"[")
        assert response.headers["content-type"] == "application/json"
        data = response.json()
        assert set(data) == {"status", "message"}
        assert data["message"].startswith("Request body is not valid JSON")
