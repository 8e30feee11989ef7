# streamhub/exceptions.py
"""
Defines custom exception classes for streamhub.

Lookups against the service registry and decoding of structured preferences
raise these. The selection resolver and the service initializer catch them
and fall back to defaults, so none of them escape those public operations.
"""


class StreamhubError(Exception):
    """Base exception class for all custom errors in streamhub."""

    pass


class ConfigurationError(StreamhubError):
    """Raised when a preference schema or configuration file is invalid."""

    pass


class ServiceNotFoundError(StreamhubError, KeyError):
    """Raised when a service id or name is not present in the registry.

    Inherits from `KeyError` so callers doing mapping-style lookups can keep
    catching the builtin.
    """

    def __init__(self, message: str, identifier=None):
        super().__init__(message)
        self.identifier = identifier

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class PreferenceDecodeError(StreamhubError, ValueError):
    """Raised when a structured preference value cannot be decoded.

    Carries the offending key and raw value so callers can log them.
    """

    def __init__(self, message: str, key: str, raw_value=None):
        super().__init__(message)
        self.key = key
        self.raw_value = raw_value
