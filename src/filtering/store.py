"""Filter stores: one named slot per list view holding its last applied filter.

The hosting screen only needs ``get``, ``set`` and ``reset_all``, so any of
these can be injected (or swapped for plain component state):

* ``InMemoryFilterStore`` keeps FilterValue copies in a dict.
* ``SessionFilterStore`` keeps snapshots in Streamlit session state, so
  filters survive page switches.
* ``JsonFileFilterStore`` keeps snapshots in a JSON document on disk.
"""

import json
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, MutableMapping, Optional, Type

import streamlit as st

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import get_logger

from .exceptions import FilterStoreError
from .filter_value import FilterValue

logger = get_logger("store")


class FilterStore(ABC):
    """Key-value store of committed filter values, keyed by domain."""

    @abstractmethod
    def get(self, domain_key: str) -> Optional[FilterValue]:
        """Return a copy of the stored value, or None if nothing is stored."""

    @abstractmethod
    def set(self, domain_key: str, value: FilterValue) -> None:
        """Replace the stored value for a domain."""

    @abstractmethod
    def reset_all(self) -> None:
        """Forget every stored filter."""


class InMemoryFilterStore(FilterStore):
    """Process-local store. Values are copied in and out."""

    def __init__(self):
        self._values: Dict[str, FilterValue] = {}

    def get(self, domain_key: str) -> Optional[FilterValue]:
        value = self._values.get(domain_key)
        return value.copy() if value is not None else None

    def set(self, domain_key: str, value: FilterValue) -> None:
        self._values[domain_key] = value.copy()

    def reset_all(self) -> None:
        self._values.clear()


class SnapshotFilterStore(FilterStore):
    """
    Base for stores that persist ``to_dict()`` snapshots.

    Args:
        registry: Domain key -> FilterValue subclass, used to rebuild values.
    """

    def __init__(self, registry: Mapping[str, Type[FilterValue]]):
        self._registry = dict(registry)

    @abstractmethod
    def _read_snapshots(self) -> Dict[str, Any]:
        """Load all snapshots."""

    @abstractmethod
    def _write_snapshots(self, snapshots: Dict[str, Any]) -> None:
        """Persist all snapshots."""

    def _value_type(self, domain_key: str) -> Type[FilterValue]:
        try:
            return self._registry[domain_key]
        except KeyError:
            raise FilterStoreError(f"Unknown filter domain: {domain_key}")

    def get(self, domain_key: str) -> Optional[FilterValue]:
        value_type = self._value_type(domain_key)
        snapshot = self._read_snapshots().get(domain_key)
        if snapshot is None:
            return None
        try:
            return value_type.from_dict(snapshot)
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Ignoring unreadable {domain_key} filter snapshot: {e}")
            return None

    def set(self, domain_key: str, value: FilterValue) -> None:
        value_type = self._value_type(domain_key)
        if not isinstance(value, value_type):
            raise FilterStoreError(
                f"{domain_key} expects {value_type.__name__}, got {type(value).__name__}"
            )
        snapshots = self._read_snapshots()
        snapshots[domain_key] = value.to_dict()
        self._write_snapshots(snapshots)

    def reset_all(self) -> None:
        self._write_snapshots({})


class SessionFilterStore(SnapshotFilterStore):
    """
    Store backed by Streamlit session state.

    Any mutable mapping can stand in for ``st.session_state`` (tests pass a
    plain dict).
    """

    SESSION_KEY = "pg_filter_snapshots"

    def __init__(
        self,
        registry: Mapping[str, Type[FilterValue]],
        session_state: Optional[MutableMapping[str, Any]] = None,
    ):
        super().__init__(registry)
        self._session = session_state if session_state is not None else st.session_state

    def _read_snapshots(self) -> Dict[str, Any]:
        return dict(self._session.get(self.SESSION_KEY, {}) or {})

    def _write_snapshots(self, snapshots: Dict[str, Any]) -> None:
        self._session[self.SESSION_KEY] = snapshots


class JsonFileFilterStore(SnapshotFilterStore):
    """Store backed by a JSON file (defaults to ``FILTER_STORE_PATH``)."""

    def __init__(
        self,
        registry: Mapping[str, Type[FilterValue]],
        path: Optional[Path] = None,
    ):
        super().__init__(registry)
        self.path = Path(path) if path is not None else config.filters.store_path

    def _read_snapshots(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Filter store {self.path} is corrupt, starting empty: {e}")
            return {}
        except OSError as e:
            raise FilterStoreError(f"Error reading {self.path}: {e}")
        return data if isinstance(data, dict) else {}

    def _write_snapshots(self, snapshots: Dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(snapshots, f, indent=2, sort_keys=True)
        except OSError as e:
            raise FilterStoreError(f"Error writing {self.path}: {e}")
