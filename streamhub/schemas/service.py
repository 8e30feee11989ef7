# streamhub/schemas/service.py
"""
Pydantic schemas for service identity and per-backend runtime state.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ServiceInfo(BaseModel):
    """Static identity of one backend in the catalog."""

    model_config = ConfigDict(frozen=True)

    service_id: int = Field(..., ge=0, description="Stable numeric service id.")
    name: str = Field(
        ..., min_length=1, description="Unique display name, used as the persisted key."
    )


class InstanceDescriptor(BaseModel):
    """A specific deployment of a federated backend.

    Persisted as JSON of the form ``{"name": ..., "url": ...}``.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="Base URL of the instance.")
    name: str = Field(..., description="Human-readable instance name.")


class BackendRuntimeConfig(BaseModel):
    """Mutable runtime configuration of one backend.

    The service initializer writes persisted credentials into these records.
    Everything else in the client reads them.
    """

    service_id: int = Field(..., ge=0)
    name: str
    instance: Optional[InstanceDescriptor] = Field(
        None, description="Selected instance for federated backends."
    )
    auth_token: Optional[str] = Field(
        None, description="Cookie/token string sent with backend requests."
    )

    def set_instance(self, url: str, name: str) -> None:
        self.instance = InstanceDescriptor(url=url, name=name)

    def set_auth_token(self, token: Optional[str]) -> None:
        self.auth_token = token
