# streamhub/initializer.py
"""
Applies persisted backend preferences to live runtime configuration.

Each backend with an entry in the preference schema gets its instance or
auth token from the store. Anything missing or malformed leaves the runtime
config as it was; none of it is reported to the caller.
"""
from __future__ import annotations

from typing import Iterable, Optional, Union

from pydantic import ValidationError

from streamhub.catalog import BACKEND_PREFERENCES
from streamhub.exceptions import ConfigurationError, PreferenceDecodeError, ServiceNotFoundError
from streamhub.registry import ServiceRegistry
from streamhub.schemas.preferences import BackendPreferences, PreferenceField, PreferenceType
from streamhub.schemas.service import BackendRuntimeConfig, InstanceDescriptor
from streamhub.store import PreferenceStore
from streamhub.utils.log_sinks import service_id_context
from streamhub.utils.logger import setup_logger

logger = setup_logger(__name__)


def read_field(store: PreferenceStore, field: PreferenceField) -> Optional[Union[bool, str]]:
    """Read one preference from the store using its declared type and default."""
    if field.type is PreferenceType.BOOLEAN:
        return store.get_boolean(field.key, bool(field.default))
    return store.get_string(field.key, field.default)


def decode_instance(key: str, raw: str) -> InstanceDescriptor:
    """Decode a persisted ``{"name": ..., "url": ...}`` instance descriptor."""
    try:
        return InstanceDescriptor.model_validate_json(raw)
    except ValidationError as e:
        raise PreferenceDecodeError(
            f"Malformed instance descriptor under '{key}': {e.error_count()} error(s)",
            key,
            raw,
        ) from e


class ServiceInitializer:
    """Pushes persisted credentials into the registry's runtime configs."""

    def __init__(
        self,
        store: PreferenceStore,
        registry: ServiceRegistry,
        preferences: Iterable[BackendPreferences] = BACKEND_PREFERENCES,
    ):
        self.store = store
        self.registry = registry
        self._preferences = {}
        for schema in preferences:
            if schema.service_name in self._preferences:
                raise ConfigurationError(
                    f"Duplicate preference schema for service '{schema.service_name}'."
                )
            self._preferences[schema.service_name] = schema

    def init_services(self) -> None:
        for service_id in self.registry.all_services():
            self.init_service(service_id)

    def init_service(self, service_id: int) -> None:
        try:
            service_name = self.registry.resolve_by_id(service_id)
            runtime = self.registry.get(service_id)
        except ServiceNotFoundError:
            logger.debug("Skipping initialization of unknown service id %s.", service_id)
            return

        schema = self._preferences.get(service_name)
        if schema is None:
            return

        token = service_id_context.set(service_id)
        try:
            if schema.target == "instance":
                self._apply_instance(schema, runtime)
            else:
                self._apply_auth_token(schema, runtime)
        finally:
            service_id_context.reset(token)

    def _apply_instance(
        self, schema: BackendPreferences, runtime: BackendRuntimeConfig
    ) -> None:
        raw = read_field(self.store, schema.primary)
        if raw is None:
            return
        try:
            instance = decode_instance(schema.primary.key, raw)
        except PreferenceDecodeError as e:
            logger.debug(
                "Keeping current instance of %s: %s",
                runtime.name,
                e,
                extra={"key": e.key, "raw_value": e.raw_value},
            )
            return
        runtime.set_instance(instance.url, instance.name)
        logger.info("Using %s instance %s (%s).", runtime.name, instance.name, instance.url)

    def _apply_auth_token(
        self, schema: BackendPreferences, runtime: BackendRuntimeConfig
    ) -> None:
        tokens = read_field(self.store, schema.primary)
        if tokens is not None:
            runtime.set_auth_token(tokens)
        if schema.override_flag is not None and read_field(self.store, schema.override_flag):
            # An enabled override wins even when its value is unset.
            runtime.set_auth_token(read_field(self.store, schema.override_value))
            logger.debug(
                "Applied override token for %s.",
                runtime.name,
                extra={"key": schema.override_value.key},
            )
