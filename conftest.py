"""Shared pytest fixtures for the pets API tests."""
import os
import tempfile

# Must be set before app modules are imported: logging and the pet store
# read these at import time.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="pets-api-logs-"))
os.environ["PETS_DB_DIR"] = tempfile.mkdtemp(prefix="pets-api-db-")

import pytest
from fastapi.testclient import TestClient

from database import db


@pytest.fixture
def api_keys(monkeypatch):
    """Both upstream API keys configured."""
    monkeypatch.setenv("GEMINI_API_KEY", "test-gemini-key")
    monkeypatch.setenv("HUGGINGFACE_API_KEY", "test-hf-key")


@pytest.fixture
def no_api_keys(monkeypatch):
    """Neither upstream API key configured."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("HUGGINGFACE_API_KEY", raising=False)


@pytest.fixture
def test_client():
    from app import app
    with TestClient(app) as client:
        yield client


@pytest.fixture
def clean_db():
    db.clear()
    yield db
    db.clear()


@pytest.fixture
def shiba():
    return {"id": "p1", "name": "Mochi", "category": "Dog", "breed": "Shiba"}


@pytest.fixture
def akita():
    return {"id": "p2", "name": "Kuma", "category": "Dog", "breed": "Akita"}


@pytest.fixture
def tabby():
    return {"id": "p3", "name": "Tama", "category": "Cat", "breed": "Tabby"}
