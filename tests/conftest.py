"""
tests/conftest.py — Shared pytest fixtures for the shipdash test suite.

Provides:
  dataset_path     — the sample shipments JSON under tests/fixtures/
  sample_shipments — the same file parsed into a list of dicts
  store            — a ShipmentStore over the sample dataset
  app / client     — the FastAPI app wired to that store, and a TestClient
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from shipdash_shared.config import Settings
from shipdash_shared.db import ShipmentStore

FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Dataset
# ---------------------------------------------------------------------------

@pytest.fixture
def dataset_path() -> Path:
    return FIXTURES_DIR / "shipments.json"


@pytest.fixture
def sample_shipments(dataset_path: Path) -> list[dict]:
    return json.loads(dataset_path.read_text())


@pytest.fixture
def app_settings(dataset_path: Path) -> Settings:
    return Settings(
        dataset_path=str(dataset_path),
        duckdb_threads=1,
        log_level="WARNING",
        log_format="console",
    )


@pytest.fixture
def store(app_settings: Settings):
    """A fresh in-memory store per test, closed afterwards."""
    shipment_store = ShipmentStore.from_settings(app_settings)
    yield shipment_store
    shipment_store.close()


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------

@pytest.fixture
def app(app_settings: Settings, store: ShipmentStore):
    from shipdash_api.app import create_app
    return create_app(app_settings, store=store)


@pytest.fixture
def client(app):
    """HTTP test client."""
    return TestClient(app)
