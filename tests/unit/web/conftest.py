"""Shared fixtures for web route tests.

Provides a test FastAPI app over the fixed-clock demo dataset and a
synchronous TestClient, so route tests are deterministic and never touch
the process-wide dataset.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from Quant_Trade.models import Instrument
from Quant_Trade.web.app import create_app


@pytest.fixture()
def app(dataset: tuple[Instrument, ...]) -> FastAPI:
    """Create a test app serving the fixed-clock dataset."""
    return create_app(dataset)


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    """Create a synchronous test client for the app."""
    return TestClient(app, raise_server_exceptions=False)
