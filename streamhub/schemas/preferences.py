# streamhub/schemas/preferences.py
"""
Typed schema of the preferences that feed backend runtime configuration.

Each backend that needs credentials or an instance declares one
`BackendPreferences` entry listing the keys it reads, their types and
defaults. The service initializer is driven entirely by these entries.
"""
from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PreferenceType(str, Enum):
    """Declared type of a persisted preference value."""

    STRING = "string"
    BOOLEAN = "boolean"
    # A JSON string decoding to an InstanceDescriptor.
    INSTANCE = "instance"


class PreferenceField(BaseModel):
    """One persisted preference key."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Store key.")
    type: PreferenceType
    default: Optional[Union[bool, str]] = Field(
        None, description="Value used when the key is absent from the store."
    )

    @model_validator(mode="after")
    def _default_matches_type(self) -> "PreferenceField":
        if self.default is None:
            if self.type is PreferenceType.BOOLEAN:
                raise ValueError(f"Boolean preference '{self.key}' needs a default.")
            return self
        if self.type is PreferenceType.BOOLEAN and not isinstance(self.default, bool):
            raise ValueError(f"Default for '{self.key}' must be a bool.")
        if self.type is not PreferenceType.BOOLEAN and not isinstance(self.default, str):
            raise ValueError(f"Default for '{self.key}' must be a string.")
        return self


class BackendPreferences(BaseModel):
    """The preferences one backend reads at initialization time.

    `primary` is applied first. When `override_flag` is stored as true,
    `override_value` replaces it, even when the override value is unset.
    """

    model_config = ConfigDict(frozen=True)

    service_name: str = Field(..., description="ServiceName the schema applies to.")
    target: Literal["instance", "auth_token"]
    primary: PreferenceField
    override_flag: Optional[PreferenceField] = None
    override_value: Optional[PreferenceField] = None

    @model_validator(mode="after")
    def _check_fields(self) -> "BackendPreferences":
        expected = (
            PreferenceType.INSTANCE
            if self.target == "instance"
            else PreferenceType.STRING
        )
        if self.primary.type is not expected:
            raise ValueError(
                f"Primary preference for target '{self.target}' must be "
                f"of type '{expected.value}'."
            )
        if (self.override_flag is None) != (self.override_value is None):
            raise ValueError(
                "override_flag and override_value must be declared together."
            )
        if self.override_flag is not None:
            if self.target != "auth_token":
                raise ValueError("Overrides are only supported for auth_token targets.")
            if self.override_flag.type is not PreferenceType.BOOLEAN:
                raise ValueError("override_flag must be a boolean preference.")
            if self.override_value.type is not expected:
                raise ValueError(
                    f"override_value must be of type '{expected.value}'."
                )
        return self
