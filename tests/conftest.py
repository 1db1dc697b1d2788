"""Pytest configuration & shared fixtures."""

import os
import sys
from types import SimpleNamespace

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before any imports
os.environ.setdefault("HOST", "127.0.0.1")
os.environ.setdefault("PORT", "8000")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ.setdefault("ENVIRONMENT", "test")


@pytest.fixture
def sample_failures():
    """Representative failure signals seen by the frontend."""
    return {
        "catalog_text": "Transaction failed: tx_bad_seq",
        "unknown_text": "something totally unknown happened",
        "network": RuntimeError("Failed to fetch"),
        "cancelled": RuntimeError("User rejected the request"),
        "wallet": RuntimeError("Freighter is not connected"),
        "catalog_exception": RuntimeError("Error: tx_bad_seq encountered during submit"),
    }


def _make_client(show_technical_details):
    from error_translator.controllers.translation_controller import TranslationController
    from error_translator.views.routes import create_app

    settings = SimpleNamespace(
        environment="test",
        show_technical_details=show_technical_details,
    )
    app = create_app(TranslationController(settings=settings))
    app.config["TESTING"] = True

    @app.route("/boom")
    def boom():
        raise RuntimeError("wallet exploded mid-render")

    return app.test_client()


@pytest.fixture
def app_client():
    """Flask test client that hides technical details."""
    with _make_client(show_technical_details=False) as client:
        yield client


@pytest.fixture
def debug_client():
    """Flask test client that exposes technical details."""
    with _make_client(show_technical_details=True) as client:
        yield client
