"""
pytest configuration and fixtures.

Every test gets its own seeded store, its own public directory and an
app built around them, so tests never share state.
"""

from pathlib import Path
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from product_server.app.core.config import Settings
from product_server.app.main import create_app
from product_server.app.services.product_store import ProductStore


@pytest.fixture
def public_dir(tmp_path: Path) -> Path:
    """Public directory with a few files of different types."""
    root = tmp_path / "public"
    root.mkdir()
    (root / "style.css").write_text("body { color: red; }\n", encoding="utf-8")
    (root / "hello.txt").write_text("hello from static\n", encoding="utf-8")
    (root / "index.html").write_text("<h1>static</h1>\n", encoding="utf-8")
    (root / "logo.PNG").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "data.bin").write_bytes(bytes(range(16)))
    (root / "docs").mkdir()
    (root / "docs" / "guide.pdf").write_bytes(b"%PDF-1.4\n")
    (tmp_path / "secret.txt").write_text("outside\n", encoding="utf-8")
    return root


@pytest.fixture
def app_settings(public_dir: Path) -> Settings:
    """Settings pointing at the temporary public directory."""
    return Settings(public_dir=str(public_dir), max_body_bytes=1024)


@pytest.fixture
def store() -> ProductStore:
    return ProductStore.seeded()


@pytest.fixture
def app(store: ProductStore, app_settings: Settings) -> FastAPI:
    return create_app(store=store, app_settings=app_settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client
