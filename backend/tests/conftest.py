"""
Pytest configuration and shared test helpers for backend tests.
"""
import os
import sys
from pathlib import Path

# In-memory ledger/stores; no MongoDB needed under pytest.
os.environ.setdefault("BRIEFLY_STORAGE", "memory")

BACKEND_DIR = Path(__file__).resolve().parent.parent
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

import pytest

# Shared TestClient fixture so tests can use in-process requests without a running server.
from fastapi.testclient import TestClient
from server import app

from briefly.models.intake import ProjectIntake


@pytest.fixture
def client():
    """TestClient for server:app; the lifespan builds a fresh in-memory service set."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def logo_intake():
    return ProjectIntake(
        client_name="Acme Bakery",
        client_email="owner@acmebakery.ng",
        project_type="Logo Design",
        budget=75000,
        timeline="3 weeks",
        goals="Refresh the bakery brand for a second location",
        requirements="Must work on signage and packaging",
        target_audience="Young professionals in Lagos",
        brand_personality="Modern and friendly",
    )


@pytest.fixture
def register_user(client):
    """Register through the API; returns (token, body)."""

    def _register(email, name="Test User", password="secret123", referral_code=None):
        payload = {"name": name, "email": email, "password": password}
        if referral_code is not None:
            payload["referralCode"] = referral_code
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 200, response.text
        body = response.json()
        return body["token"], body

    return _register
