"""Dues list view.

Only pending payments (status 2) are listed. Besides the pipeline this
module classifies each due by urgency, which drives both the card badge
and the display order.
"""

import sys
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import DOMAIN_DUES, DUE_STATUS_PENDING, DUE_URGENCY_ORDER, config

from filtering.filter_value import DateRange, FilterValue, date_range_field
from filtering.pipeline import DateFacet, FilterPipeline
from filtering.predicates import parse_date
from filtering.records import as_number, pick
from filtering.sections import FacetSection, date_range_section


@dataclass
class DueFilter(FilterValue):
    due_date: DateRange = date_range_field()


EMPTY_DUE_FILTER = DueFilter()


def is_pending_due(record: Mapping[str, Any]) -> bool:
    return as_number(pick(record, "status")) == DUE_STATUS_PENDING


def build_sections() -> List[FacetSection]:
    return [date_range_section(DOMAIN_DUES, "due_date")]


DUE_PIPELINE: FilterPipeline[DueFilter] = FilterPipeline(
    name=DOMAIN_DUES,
    base=is_pending_due,
    search_fields=(
        lambda r: pick(r, "tenantDetails.name", "tenantName"),
        lambda r: pick(r, "tenantDetails.roomNumber", "roomNumber"),
        lambda r: pick(r, "tenantDetails.phoneNumber", "phoneNumber"),
    ),
    dates=(DateFacet("due_date", lambda r: pick(r, "dueDate")),),
)


def apply_filters(
    records: Sequence[Mapping[str, Any]],
    filter_value: Optional[DueFilter] = None,
    search_text: Optional[str] = "",
) -> List[Mapping[str, Any]]:
    """
    Filter the dues list.

    Args:
        records: Payment records as fetched (any status).
        filter_value: Live filter; None means unconstrained.
        search_text: Matches the tenant's name, room number or phone.

    Returns:
        Pending dues passing the filter, in input order.
    """
    return DUE_PIPELINE.apply(records, filter_value or EMPTY_DUE_FILTER, search_text)


def _days_until(due_date: Any, today: Optional[date]) -> Optional[int]:
    due = parse_date(due_date)
    if due is None:
        return None
    today = today or date.today()
    return (due.date() - today).days


def classify_due_urgency(due_date: Any, today: Optional[date] = None) -> str:
    """
    Classify a due date relative to today.

    Args:
        due_date: Raw ``dueDate`` value.
        today: Reference day; defaults to the local date.

    Returns:
        ``"overdue"`` (before today), ``"due-soon"`` (within
        ``DUE_SOON_DAYS``), ``"upcoming"`` (within ``DUE_UPCOMING_DAYS``)
        or ``"future"``. A missing date counts as upcoming.
    """
    days = _days_until(due_date, today)
    if days is None:
        return "upcoming"
    if days < 0:
        return "overdue"
    if days <= config.filters.due_soon_days:
        return "due-soon"
    if days <= config.filters.due_upcoming_days:
        return "upcoming"
    return "future"


def days_overdue(due_date: Any, today: Optional[date] = None) -> int:
    """Whole days past the due date; 0 when not overdue or undated."""
    days = _days_until(due_date, today)
    if days is None or days >= 0:
        return 0
    return -days


def sort_dues(
    records: Sequence[Mapping[str, Any]],
    today: Optional[date] = None,
) -> List[Mapping[str, Any]]:
    """Order dues by urgency, then earliest due date first."""

    def sort_key(record: Mapping[str, Any]):
        urgency = classify_due_urgency(pick(record, "dueDate"), today)
        due = parse_date(pick(record, "dueDate")) or datetime.min
        return (DUE_URGENCY_ORDER[urgency], due)

    return sorted(records, key=sort_key)
