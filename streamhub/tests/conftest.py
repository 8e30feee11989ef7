"""
Shared fixtures for the streamhub test suite.
"""
import pytest

from streamhub.registry import ServiceRegistry, default_registry
from streamhub.store import InMemoryPreferenceStore


@pytest.fixture
def store() -> InMemoryPreferenceStore:
    """An empty in-memory preference store."""
    return InMemoryPreferenceStore()


@pytest.fixture
def registry() -> ServiceRegistry:
    """A fresh registry holding the built-in catalog."""
    return default_registry()
