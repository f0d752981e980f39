"""Hosting screen controller for a filterable list view.

Holds the fetched records, the search text and the live filter value, owns
the view's filter sheet, and memoizes the visible subset on its three
inputs. The live filter changes only through the sheet's commit (or an
explicit ``set_filter``/``reset_filters``), and every commit is written to
the injected store when one is given.
"""

import sys
from datetime import date
from pathlib import Path
from typing import Any, Callable, Generic, List, Mapping, Optional, Sequence, Tuple, TypeVar

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.logging_config import get_logger

from .filter_value import FilterValue
from .sections import FacetSection
from .sheet import FilterSheet
from .store import FilterStore

logger = get_logger("screen")

F = TypeVar("F", bound=FilterValue)
Record = Mapping[str, Any]
ApplyFilters = Callable[[Sequence[Record], F, str], List[Record]]


class FilterScreen(Generic[F]):
    """
    One list view's filter state.

    Args:
        domain_key: Slot name in the filter store.
        sections: Filter sheet sections for this view.
        empty_value: The view's pristine filter value.
        apply_filters: The view's pipeline, ``(records, filter, search)``.
        records: Initial records (already fetched).
        store: Optional persisted store to seed from and write back to.
        clock: Reference-day source for views whose results depend on the
            current day. When set, the day is part of the memo key and is
            passed to ``apply_filters`` as ``today``.
    """

    def __init__(
        self,
        domain_key: str,
        sections: Sequence[FacetSection],
        empty_value: F,
        apply_filters: ApplyFilters,
        records: Optional[Sequence[Record]] = None,
        store: Optional[FilterStore] = None,
        clock: Optional[Callable[[], date]] = None,
    ):
        self.domain_key = domain_key
        self._empty = empty_value.copy()
        self._apply_filters = apply_filters
        self._store = store
        self._clock = clock

        self._records: List[Record] = list(records or [])
        self._records_version = 0
        self._search_text = ""

        self._filter: F = self._initial_filter()
        self.sheet: FilterSheet[F] = FilterSheet(
            sections,
            reset_value=self._empty,
            on_change=self._commit_filter,
        )

        self._cache_key: Optional[Tuple[int, F, str, Optional[date]]] = None
        self._cache: List[Record] = []

    def _initial_filter(self) -> F:
        if self._store is None:
            return self._empty.copy()
        stored = self._store.get(self.domain_key)
        if stored is None:
            return self._empty.copy()
        if not isinstance(stored, type(self._empty)):
            logger.warning(
                f"Stored {self.domain_key} filter is {type(stored).__name__}; using empty filter"
            )
            return self._empty.copy()
        return stored

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    @property
    def records(self) -> List[Record]:
        return list(self._records)

    def set_records(self, records: Optional[Sequence[Record]]) -> None:
        """Replace the source list (e.g. after a refetch)."""
        self._records = list(records or [])
        self._records_version += 1

    @property
    def search_text(self) -> str:
        return self._search_text

    def set_search(self, text: Optional[str]) -> None:
        self._search_text = text or ""

    @property
    def filter(self) -> F:
        """A copy of the live filter value."""
        return self._filter.copy()

    @property
    def filter_active(self) -> bool:
        """True when any facet constrains the list (drives the filter badge)."""
        return not self._filter.is_empty

    def open_filters(self) -> None:
        """Open the filter sheet on the live value."""
        self.sheet.open(self._filter)

    def set_filter(self, value: F) -> None:
        """Commit a filter value directly, bypassing the sheet."""
        self._commit_filter(value)

    def reset_filters(self) -> None:
        """Commit the pristine filter value."""
        self._commit_filter(self._empty.copy())

    def _commit_filter(self, value: F) -> None:
        self._filter = value.copy()
        if self._store is not None:
            self._store.set(self.domain_key, self._filter)
        logger.debug(f"{self.domain_key} filter committed: {self._filter.get_summary()}")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    @property
    def visible_records(self) -> List[Record]:
        """Filtered records, recomputed only when an input changed."""
        today = self._clock() if self._clock is not None else None
        key = (self._records_version, self._filter, self._search_text, today)
        if self._cache_key is not None and self._cache_key == key:
            return list(self._cache)

        if today is None:
            self._cache = self._apply_filters(self._records, self._filter, self._search_text)
        else:
            self._cache = self._apply_filters(
                self._records, self._filter, self._search_text, today=today
            )
        self._cache_key = (self._records_version, self._filter.copy(), self._search_text, today)
        return list(self._cache)

    @property
    def is_filtered(self) -> bool:
        """True when search or filters are active (for the empty-state message)."""
        return self.filter_active or bool(self._search_text.strip())
