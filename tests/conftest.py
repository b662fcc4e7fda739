"""
Pytest configuration and shared fixtures.

This module provides common fixtures for testing:
- Social graph stores and engines
- Services over a shared context
- API client
"""

import os
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set test environment variables before imports
os.environ["FRIENDREC_MAX_DISTANCE"] = "2"
os.environ["FRIENDREC_LOG_LEVEL"] = "DEBUG"

from friendrec.config import Config, RecommendationConfig
from friendrec.graph import SocialGraphStore, DistanceEngine, RecommendationEngine
from friendrec.services import ServiceContext, NetworkService, RecommendationService


# =============================================================================
# Graph Fixtures
# =============================================================================

@pytest.fixture
def empty_store() -> SocialGraphStore:
    """Create an empty graph store."""
    return SocialGraphStore()


@pytest.fixture
def diamond_store() -> SocialGraphStore:
    """
    Users 1-4 where 1 and 4 share friends 2 and 3.

        1 - 2
        |   |
        3 - 4
    """
    store = SocialGraphStore()
    for a, b in [(1, 2), (1, 3), (2, 4), (3, 4)]:
        store.add_connection(a, b)
    return store


@pytest.fixture
def chain_store() -> SocialGraphStore:
    """A path 0-1-2-3-4-5 plus a disconnected pair 10-11."""
    store = SocialGraphStore()
    for a, b in [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5), (10, 11)]:
        store.add_connection(a, b)
    return store


@pytest.fixture
def sample_store() -> SocialGraphStore:
    """The six-user network from the demonstration input."""
    store = SocialGraphStore()
    for a, b in [(1, 2), (1, 3), (2, 4), (3, 4), (3, 5), (4, 5), (4, 6)]:
        store.add_connection(a, b)
    return store


@pytest.fixture
def distances(diamond_store) -> DistanceEngine:
    return DistanceEngine(diamond_store)


@pytest.fixture
def engine(diamond_store) -> RecommendationEngine:
    return RecommendationEngine(diamond_store)


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def test_config() -> Config:
    """Configuration with a fixed hop bound."""
    return Config(recommendation=RecommendationConfig(max_distance=2))


@pytest.fixture
def service_context(test_config, sample_store) -> ServiceContext:
    """Context over the sample network."""
    return ServiceContext.create(config=test_config, store=sample_store)


@pytest.fixture
def network_service(service_context) -> NetworkService:
    return NetworkService(service_context)


@pytest.fixture
def recommendation_service(service_context) -> RecommendationService:
    return RecommendationService(service_context)


# =============================================================================
# API Client Fixtures
# =============================================================================

@pytest.fixture
def api_services(test_config):
    """Fresh services container for each API test."""
    from api.deps import Services

    context = ServiceContext.create(config=test_config)
    return Services(
        config=test_config,
        context=context,
        network=NetworkService(context),
        recommendations=RecommendationService(context)
    )


@pytest.fixture
def api_app(api_services):
    """Create FastAPI app for testing, bound to a fresh graph."""
    from api.main import app
    from api.deps import services_dep

    app.dependency_overrides[services_dep] = lambda: api_services
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def api_client(api_app) -> TestClient:
    """Create synchronous test client for API."""
    return TestClient(api_app)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as unit test"
    )
    config.addinivalue_line(
        "markers", "api: mark test as API endpoint test"
    )
