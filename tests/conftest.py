# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides common fixtures for testing
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("FULL_NAME", "john_doe")
os.environ.setdefault("BIRTH_DATE", "17091999")
os.environ.setdefault("EMAIL", "john@xyz.com")
os.environ.setdefault("ROLL_NUMBER", "ABCD123")
os.environ.setdefault("DEDUPLICATE_RESULTS", "false")

import pytest
from fastapi.testclient import TestClient

from core.models.identity import Identity


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """TestClient with lifespan events; dependency overrides reset afterwards."""
    from app.main import app

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def identity():
    """An identity that differs from the configured one."""
    return Identity(
        full_name="jane_roe",
        birth_date="01012000",
        email="jane@example.com",
        roll_number="XYZ789",
    )


@pytest.fixture
def sample_tokens():
    """Mixed token list with a known classification."""
    return ["1", "2", "3", "a", "A", "$", "Z"]


@pytest.fixture
def mixed_tokens():
    """Tokens covering every branch, with JSON numbers mixed in."""
    return ["a", "1", "334", "4", "R", "$", 42, 7, "ab1", "-3", "2.5", ""]
