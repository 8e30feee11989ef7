"""
Tests for the service registry.
"""
import logging

import pytest

from streamhub.catalog import DEFAULT_PEERTUBE_INSTANCE, NICONICO, PEERTUBE, SERVICES, YOUTUBE
from streamhub.exceptions import ServiceNotFoundError
from streamhub.registry import ServiceRegistry
from streamhub.schemas.service import ServiceInfo


def test_default_registry_contains_catalog_in_order(registry):
    """Verify the default registry enumerates the catalog in id order."""
    assert registry.all_services() == [0, 1, 2, 3, 4, 5, 6]
    assert registry.services() == list(SERVICES)


def test_resolve_by_name_and_id(registry):
    """Verify two-way lookup between names and ids."""
    assert registry.resolve_by_name("NicoNico") == NICONICO.service_id
    assert registry.resolve_by_id(YOUTUBE.service_id) == "YouTube"


def test_resolve_unknown_name_raises(registry):
    """Verify unknown names raise ServiceNotFoundError, which is also a KeyError."""
    with pytest.raises(ServiceNotFoundError, match="No service named 'Vimeo'"):
        registry.resolve_by_name("Vimeo")
    with pytest.raises(KeyError):
        registry.resolve_by_name("Vimeo")


def test_resolve_unknown_id_raises(registry):
    """Verify unknown ids raise ServiceNotFoundError carrying the identifier."""
    with pytest.raises(ServiceNotFoundError) as exc_info:
        registry.resolve_by_id(42)
    assert exc_info.value.identifier == 42


def test_get_returns_shared_runtime_config(registry):
    """Verify get() hands out the same mutable record on every call."""
    runtime = registry.get(NICONICO.service_id)
    runtime.set_auth_token("user_session=abc")
    assert registry.get(NICONICO.service_id).auth_token == "user_session=abc"


def test_peertube_starts_with_default_instance(registry):
    """Verify PeerTube's runtime config starts at the default instance."""
    assert registry.get(PEERTUBE.service_id).instance == DEFAULT_PEERTUBE_INSTANCE
    assert registry.get(YOUTUBE.service_id).instance is None


def test_reregistering_same_service_keeps_runtime_config(registry):
    """Verify identical re-registration is a no-op."""
    registry.get(NICONICO.service_id).set_auth_token("token")
    registry.register(ServiceInfo(service_id=6, name="NicoNico"))
    assert registry.get(NICONICO.service_id).auth_token == "token"
    assert len(registry) == len(SERVICES)


def test_conflicting_registration_replaces_and_warns(caplog):
    """Verify a service claiming an existing name replaces the old entry."""
    registry = ServiceRegistry([ServiceInfo(service_id=0, name="YouTube")])
    with caplog.at_level(logging.WARNING):
        registry.register(ServiceInfo(service_id=9, name="YouTube"))

    assert "Replacing service 0 (YouTube)" in caplog.text
    assert registry.resolve_by_name("YouTube") == 9
    assert 0 not in registry
    with pytest.raises(ServiceNotFoundError):
        registry.get(0)


def test_bool_is_not_a_service_id(registry):
    """Verify True/False never resolve to ids 1/0."""
    assert True not in registry
    with pytest.raises(ServiceNotFoundError):
        registry.resolve_by_id(True)
    with pytest.raises(ServiceNotFoundError):
        registry.get(False)
