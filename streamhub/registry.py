# streamhub/registry.py
"""
Service registry for streamhub.

- Two-way lookup between service ids and names.
- Enumeration in registration order.
- One mutable `BackendRuntimeConfig` per registered service.
- Idempotent registration (re-registering an identical service is a no-op).
"""
from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional

from streamhub.catalog import DEFAULT_PEERTUBE_INSTANCE, PEERTUBE, SERVICES
from streamhub.exceptions import ServiceNotFoundError
from streamhub.schemas.service import BackendRuntimeConfig, InstanceDescriptor, ServiceInfo
from streamhub.utils.logger import setup_logger

logger = setup_logger(__name__)


class ServiceRegistry:
    """Holds the registered services and their runtime configuration."""

    def __init__(self, services: Iterable[ServiceInfo] = ()):
        self._lock = threading.RLock()
        self._by_id: Dict[int, ServiceInfo] = {}
        self._by_name: Dict[str, ServiceInfo] = {}
        self._runtime: Dict[int, BackendRuntimeConfig] = {}
        for service in services:
            self.register(service)

    def register(
        self, service: ServiceInfo, instance: Optional[InstanceDescriptor] = None
    ) -> None:
        """Register a service.

        Re-registering the same (id, name) pair keeps the existing runtime
        config. Claiming an id or a name already held by a different service
        replaces the old entry with a warning.
        """
        with self._lock:
            existing = self._by_id.get(service.service_id)
            if existing == service:
                return
            for clash in (existing, self._by_name.get(service.name)):
                if clash is not None:
                    logger.warning(
                        "Replacing service %s (%s) with %s (%s).",
                        clash.service_id,
                        clash.name,
                        service.service_id,
                        service.name,
                    )
                    self._by_id.pop(clash.service_id, None)
                    self._by_name.pop(clash.name, None)
                    self._runtime.pop(clash.service_id, None)
            self._by_id[service.service_id] = service
            self._by_name[service.name] = service
            self._runtime[service.service_id] = BackendRuntimeConfig(
                service_id=service.service_id, name=service.name, instance=instance
            )
            logger.debug("Registered service %s: %s", service.service_id, service.name)

    def resolve_by_name(self, name: str) -> int:
        service = self._by_name.get(name)
        if service is None:
            raise ServiceNotFoundError(f"No service named '{name}'.", name)
        return service.service_id

    def resolve_by_id(self, service_id: int) -> str:
        service = self._lookup_id(service_id)
        if service is None:
            raise ServiceNotFoundError(f"No service with id {service_id}.", service_id)
        return service.name

    def _lookup_id(self, service_id: int) -> Optional[ServiceInfo]:
        # bool is an int subclass but never a service id.
        if isinstance(service_id, bool):
            return None
        return self._by_id.get(service_id)

    def all_services(self) -> List[int]:
        """Return registered service ids in registration order."""
        return list(self._by_id)

    def services(self) -> List[ServiceInfo]:
        return list(self._by_id.values())

    def get(self, service_id: int) -> BackendRuntimeConfig:
        """Return the live runtime config of a service.

        The returned object is shared; mutations are visible to every holder.
        """
        if self._lookup_id(service_id) is None:
            raise ServiceNotFoundError(f"No service with id {service_id}.", service_id)
        return self._runtime[service_id]

    def __contains__(self, service_id: object) -> bool:
        return not isinstance(service_id, bool) and service_id in self._by_id

    def __len__(self) -> int:
        return len(self._by_id)


def default_registry() -> ServiceRegistry:
    """Build a registry holding the built-in catalog."""
    registry = ServiceRegistry()
    for service in SERVICES:
        instance = DEFAULT_PEERTUBE_INSTANCE if service == PEERTUBE else None
        registry.register(service, instance=instance)
    return registry
