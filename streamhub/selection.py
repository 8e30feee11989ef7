# streamhub/selection.py
"""
Reads and writes the currently selected backend.

The selection is persisted by service name, which survives re-numbering of
the catalog, and handed out as a service id. Any name or id the registry does
not know is replaced by the fallback service, so the stored value always
resolves.
"""
from __future__ import annotations

from typing import Optional, Union

from streamhub.catalog import CURRENT_SERVICE_KEY, DEFAULT_FALLBACK_SERVICE
from streamhub.exceptions import ServiceNotFoundError
from streamhub.registry import ServiceRegistry
from streamhub.schemas.service import ServiceInfo
from streamhub.store import PreferenceStore
from streamhub.utils.config import get_config
from streamhub.utils.logger import setup_logger

logger = setup_logger(__name__)


class SelectionResolver:
    """Fallback-safe access to the current-service preference."""

    def __init__(
        self,
        store: PreferenceStore,
        registry: ServiceRegistry,
        fallback: ServiceInfo = DEFAULT_FALLBACK_SERVICE,
        default_service_name: Optional[str] = None,
    ):
        self.store = store
        self.registry = registry
        self.fallback = fallback
        if default_service_name is None:
            default_service_name = get_config()["selection"]["default_service"]
        self.default_service_name = default_service_name

    def get_selected_service_id(self) -> int:
        """Return the id of the selected service, or the fallback's id."""
        service_name = self.store.get_string(
            CURRENT_SERVICE_KEY, self.default_service_name
        )
        try:
            return self.registry.resolve_by_name(service_name)
        except ServiceNotFoundError:
            logger.info(
                "Selected service '%s' is unknown; using %s.",
                service_name,
                self.fallback.name,
            )
            return self.fallback.service_id

    def set_selected_service_id(self, service: Union[int, str]) -> None:
        """Persist the selected service, given either its id or its name."""
        if isinstance(service, str):
            self.set_selected_service_name(service)
            return
        try:
            service_name = self.registry.resolve_by_id(service)
        except ServiceNotFoundError:
            logger.info(
                "Cannot select unknown service id %s; selecting %s.",
                service,
                self.fallback.name,
            )
            service_name = self.fallback.name
        self._persist(service_name)

    def set_selected_service_name(self, service_name: str) -> None:
        try:
            self.registry.resolve_by_name(service_name)
        except ServiceNotFoundError:
            logger.info(
                "Cannot select unknown service '%s'; selecting %s.",
                service_name,
                self.fallback.name,
            )
            service_name = self.fallback.name
        self._persist(service_name)

    def _persist(self, service_name: str) -> None:
        self.store.set_string(CURRENT_SERVICE_KEY, service_name)
        logger.debug("Selected service set to '%s'.", service_name)
