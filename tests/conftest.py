"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides registry, board and API client fixtures.

==============================================================================
"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient

from app.catalog.registry import ProductRegistry, build_default_registry
from app.main import Application
from app.services.product_board import ProductBoard


# ============================================================================
# DOMAIN FIXTURES
# ============================================================================

@pytest.fixture
def registry() -> ProductRegistry:
    """Registry populated with the default built-in creators."""
    return build_default_registry()


@pytest.fixture
def board(registry: ProductRegistry) -> ProductBoard:
    """Empty product board backed by the default registry."""
    return ProductBoard(registry)


# ============================================================================
# API FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def client() -> Generator[TestClient, None, None]:
    """Create test client for a fresh application (own registry and board)."""
    app = Application().app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def book(client: TestClient) -> dict:
    """Create a book through the API."""
    response = client.post(
        "/api/v1/products",
        json={"type": "book", "name": "Dune", "price": "12.5", "author": "Herbert", "pages": 412}
    )
    assert response.status_code == 200
    return response.json()["product"]
