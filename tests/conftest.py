"""
Pytest fixtures for the phishing checker. Builds a fresh Flask app per test.
"""

from __future__ import annotations

import pytest


@pytest.fixture
def app():
    from app import create_app

    return create_app({"TESTING": True, "ANALYSIS_DELAY_MS": 0})


@pytest.fixture
def client(app):
    """Flask test client bound to the per-test app."""
    return app.test_client()
