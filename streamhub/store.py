# streamhub/store.py
"""
Key-value preference stores.

The selection resolver and the service initializer only depend on the
`PreferenceStore` protocol: synchronous, single-key get/set of strings and
booleans. Two implementations ship here, an in-memory dict and a JSON file.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, Union, runtime_checkable

from streamhub.utils.logger import setup_logger

logger = setup_logger(__name__)


@runtime_checkable
class PreferenceStore(Protocol):
    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]: ...

    def get_boolean(self, key: str, default: bool = False) -> bool: ...

    def set_string(self, key: str, value: Optional[str]) -> None: ...

    def set_boolean(self, key: str, value: bool) -> None: ...


class InMemoryPreferenceStore:
    """Dict-backed store. Values of the wrong type read as the default."""

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(values or {})

    def _read(self) -> Dict[str, Any]:
        return self._values

    def _write(self, values: Dict[str, Any]) -> None:
        self._values = values

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self._read().get(key)
        return value if isinstance(value, str) else default

    def get_boolean(self, key: str, default: bool = False) -> bool:
        value = self._read().get(key)
        return value if isinstance(value, bool) else default

    def set_string(self, key: str, value: Optional[str]) -> None:
        self._set(key, value)

    def set_boolean(self, key: str, value: bool) -> None:
        self._set(key, bool(value))

    def _set(self, key: str, value: Any) -> None:
        values = dict(self._read())
        if value is None:
            values.pop(key, None)
        else:
            values[key] = value
        self._write(values)

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._read())


class JsonFilePreferenceStore(InMemoryPreferenceStore):
    """Preferences persisted as a flat JSON object in a single file.

    The file is read on every access and rewritten in full on every set, so
    several processes see each other's writes. A missing, unreadable or
    corrupt file reads as an empty store.
    """

    def __init__(self, path: Union[str, Path]):
        super().__init__()
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Could not read preferences from %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring %s: expected a JSON object.", self.path)
            return {}
        return data

    def _write(self, values: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(values, indent=2, sort_keys=True), encoding="utf-8")
        tmp_path.replace(self.path)
        logger.debug("Wrote %d preferences to %s", len(values), self.path)
