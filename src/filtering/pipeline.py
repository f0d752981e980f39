"""Generic predicate composition for list views.

A ``FilterPipeline`` declares, for one list view, which record fields the
search box looks at and which record field each facet tests. ``apply()``
ANDs everything together:

1. the list view's fixed base predicate (e.g. only booking statuses),
2. text search (OR across the search fields),
3. one membership test per non-empty checkbox facet,
4. one range test per date facet with a bound set.

Input order is preserved and records are never mutated.
"""

import sys
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Any, Callable, Collection, Generic, List, Mapping, Optional, Sequence, TypeVar

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.logging_config import get_logger

from .filter_value import DateRange, FilterValue
from .predicates import any_text_matches, date_in_range, in_set

logger = get_logger("pipeline")

Record = Mapping[str, Any]
F = TypeVar("F", bound=FilterValue)


@dataclass(frozen=True)
class MembershipFacet:
    """
    Ties a checkbox facet to a record field.

    Args:
        key: Facet key in the filter value.
        accessor: Reads the compared value off a record.
        normalize: Applied to the record value and to every selected value
            before comparing (e.g. numeric status codes sent as strings).
        match: ``in_set`` for single-valued fields, ``contains_all`` for
            multi-valued ones.
    """

    key: str
    accessor: Callable[[Record], Any]
    normalize: Optional[Callable[[Any], Any]] = None
    match: Callable[[Any, Collection[Any]], bool] = in_set


@dataclass(frozen=True)
class DateFacet:
    """Ties a date facet to a record's raw date field."""

    key: str
    accessor: Callable[[Record], Any]
    utc_offset: Optional[timedelta] = None


@dataclass
class FilterPipeline(Generic[F]):
    """Per-list-view composition of search, membership and date predicates."""

    name: str
    search_fields: Sequence[Callable[[Record], Any]] = field(default_factory=tuple)
    membership: Sequence[MembershipFacet] = field(default_factory=tuple)
    dates: Sequence[DateFacet] = field(default_factory=tuple)
    base: Optional[Callable[[Record], bool]] = None

    def apply(
        self,
        records: Sequence[Record],
        filter_value: F,
        search_text: Optional[str] = "",
    ) -> List[Record]:
        """
        Return the records that pass every active predicate.

        Args:
            records: Records as fetched, in display order.
            filter_value: The live (committed) filter value.
            search_text: Search box contents; blank means no search.

        Returns:
            New list, same relative order as the input.
        """
        result = list(records or [])
        total = len(result)

        if self.base is not None:
            result = [r for r in result if self.base(r)]

        query = (search_text or "").strip()
        if query and self.search_fields:
            result = [
                r for r in result
                if any_text_matches((accessor(r) for accessor in self.search_fields), query)
            ]

        for facet in self.membership:
            selected = _facet_value(filter_value, facet.key)
            if not selected:
                continue
            if not isinstance(selected, (list, tuple, set, frozenset)):
                logger.warning(f"{self.name}.{facet.key} is not a list facet; ignored")
                continue
            if facet.normalize is not None:
                wanted = [facet.normalize(v) for v in selected]
                result = [
                    r for r in result
                    if facet.match(_normalize_field(facet.accessor(r), facet.normalize), wanted)
                ]
            else:
                wanted = list(selected)
                result = [r for r in result if facet.match(facet.accessor(r), wanted)]

        for facet in self.dates:
            date_range = _facet_value(filter_value, facet.key)
            if not isinstance(date_range, DateRange) or not date_range.is_set:
                continue
            result = [
                r for r in result
                if date_in_range(facet.accessor(r), date_range, facet.utc_offset)
            ]

        logger.debug(f"{self.name}: {len(result)} of {total} records visible")
        return result


def _facet_value(filter_value: FilterValue, key: str) -> Any:
    if filter_value is None:
        return None
    return getattr(filter_value, key, None)


def _normalize_field(value: Any, normalize: Callable[[Any], Any]) -> Any:
    if value is None:
        return None
    # Multi-valued fields normalize element-wise
    if isinstance(value, (list, tuple, set, frozenset)):
        return [normalize(v) for v in value]
    return normalize(value)
