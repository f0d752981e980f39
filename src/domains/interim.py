"""Interim (short-stay) bookings list view.

Only status 7 records are listed. The backend stores dates in UTC; they are
compared in the property's local time (IST by default, see
``INTERIM_UTC_OFFSET_MINUTES``). The status facet filters on a derived
value: a booking is upcoming before its joining day, expired after its
move-out day, and active in between.
"""

import sys
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import DOMAIN_INTERIM, INTERIM_STATUS_ORDER, STATUS_INTERIM, config

from filtering.filter_value import DateRange, FilterValue, checkbox_field, date_range_field
from filtering.pipeline import DateFacet, FilterPipeline, MembershipFacet
from filtering.predicates import parse_date
from filtering.records import as_number, pick
from filtering.sections import FacetSection, checkbox_section, date_range_section


@dataclass
class InterimFilter(FilterValue):
    status: List[str] = checkbox_field()
    joining_date: DateRange = date_range_field()
    booking_date: DateRange = date_range_field()


EMPTY_INTERIM_FILTER = InterimFilter()


def local_offset() -> timedelta:
    """UTC offset the interim view compares dates in."""
    return timedelta(minutes=config.filters.interim_utc_offset_minutes)


def is_interim(record: Mapping[str, Any]) -> bool:
    return as_number(pick(record, "status")) == STATUS_INTERIM


def interim_booking_status(
    joining_date: Any,
    move_out_date: Any,
    today: Optional[date] = None,
) -> str:
    """
    Derive a booking's status from its stay dates.

    Args:
        joining_date: Raw or parsed joining date.
        move_out_date: Raw or parsed move-out date.
        today: Reference day; defaults to the local date.

    Returns:
        ``"upcoming"``, ``"active"`` or ``"expired"``. A booking missing
        either date is upcoming.
    """
    offset = local_offset()
    joining = parse_date(joining_date, offset)
    move_out = parse_date(move_out_date, offset)
    if joining is None or move_out is None:
        return "upcoming"

    today = today or date.today()
    if today < joining.date():
        return "upcoming"
    if today > move_out.date():
        return "expired"
    return "active"


def record_status(record: Mapping[str, Any], today: Optional[date] = None) -> str:
    return interim_booking_status(
        pick(record, "joiningDate"), pick(record, "moveOutDate"), today
    )


def build_sections() -> List[FacetSection]:
    """Filter sheet sections for the interim view, in tab order."""
    return [
        checkbox_section(DOMAIN_INTERIM, "status"),
        date_range_section(DOMAIN_INTERIM, "joining_date"),
        date_range_section(DOMAIN_INTERIM, "booking_date"),
    ]


def build_pipeline(today: Optional[date] = None) -> FilterPipeline[InterimFilter]:
    """
    Build the interim pipeline.

    The derived status depends on the reference day, so the pipeline is
    rebuilt per call rather than held as a module constant.
    """
    offset = local_offset()
    return FilterPipeline(
        name=DOMAIN_INTERIM,
        base=is_interim,
        search_fields=(
            lambda r: pick(r, "tenantName", "name"),
            lambda r: pick(r, "phoneNumber", "phone"),
            lambda r: pick(r, "roomNumber", "room"),
        ),
        membership=(
            MembershipFacet("status", lambda r: record_status(r, today)),
        ),
        dates=(
            DateFacet("joining_date", lambda r: pick(r, "joiningDate"), offset),
            DateFacet("booking_date", lambda r: pick(r, "bookingDate"), offset),
        ),
    )


def apply_filters(
    records: Sequence[Mapping[str, Any]],
    filter_value: Optional[InterimFilter] = None,
    search_text: Optional[str] = "",
    today: Optional[date] = None,
) -> List[Mapping[str, Any]]:
    """
    Filter the interim bookings list.

    Args:
        records: Tenant records as fetched (any status).
        filter_value: Live filter; None means unconstrained.
        search_text: Matches name, phone or room number.
        today: Reference day for the derived status.

    Returns:
        Interim bookings passing the filter, in input order.
    """
    pipeline = build_pipeline(today)
    return pipeline.apply(records, filter_value or EMPTY_INTERIM_FILTER, search_text)


def sort_interim(
    records: Sequence[Mapping[str, Any]],
    today: Optional[date] = None,
) -> List[Mapping[str, Any]]:
    """Order bookings active, upcoming, expired; then by joining date."""
    offset = local_offset()

    def sort_key(record: Mapping[str, Any]):
        status = record_status(record, today)
        joining = parse_date(pick(record, "joiningDate"), offset) or datetime.max
        return (INTERIM_STATUS_ORDER.get(status, len(INTERIM_STATUS_ORDER)), joining)

    return sorted(records, key=sort_key)
