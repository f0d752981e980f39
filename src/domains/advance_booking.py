"""Advance booking list view.

Only records whose status is an advance-booking code (active, expired,
cancelled) are ever shown, whatever the filter says. Display ordering is
``sort_advance_bookings``; ``apply_filters`` keeps input order.
"""

import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import ADVANCE_BOOKING_STATUSES, DOMAIN_ADVANCE_BOOKING, STATUS_ADVANCE_BOOKING

from filtering.filter_value import DateRange, FilterValue, checkbox_field, date_range_field
from filtering.pipeline import DateFacet, FilterPipeline, MembershipFacet
from filtering.predicates import parse_date, pick_date
from filtering.records import as_number, pick
from filtering.sections import FacetSection, checkbox_section, date_range_section

JOINING_DATE_FIELDS = ("joiningDate", "joinedOn", "joinDate")


@dataclass
class AdvanceBookingFilter(FilterValue):
    status: List[int] = checkbox_field()
    booking_date: DateRange = date_range_field()
    joining_date: DateRange = date_range_field()


EMPTY_ADVANCE_BOOKING_FILTER = AdvanceBookingFilter()


def booking_name(record: Mapping[str, Any]) -> Any:
    return pick(record, "tenantName", "name")


def booking_phone(record: Mapping[str, Any]) -> Any:
    return pick(record, "phoneNumber", "phone")


def booking_room(record: Mapping[str, Any]) -> Any:
    return pick(record, "roomNumber", "room")


def is_advance_booking(record: Mapping[str, Any]) -> bool:
    """True if the record belongs in the advance booking view at all."""
    return as_number(pick(record, "status")) in ADVANCE_BOOKING_STATUSES


def build_sections() -> List[FacetSection]:
    """Filter sheet sections for the advance booking view, in tab order."""
    return [
        checkbox_section(DOMAIN_ADVANCE_BOOKING, "status"),
        date_range_section(DOMAIN_ADVANCE_BOOKING, "booking_date"),
        date_range_section(DOMAIN_ADVANCE_BOOKING, "joining_date"),
    ]


ADVANCE_BOOKING_PIPELINE: FilterPipeline[AdvanceBookingFilter] = FilterPipeline(
    name=DOMAIN_ADVANCE_BOOKING,
    base=is_advance_booking,
    search_fields=(booking_name, booking_phone, booking_room),
    membership=(
        MembershipFacet("status", lambda r: pick(r, "status"), as_number),
    ),
    dates=(
        DateFacet("booking_date", lambda r: pick(r, "bookingDate")),
        DateFacet("joining_date", lambda r: pick_date(r, *JOINING_DATE_FIELDS)),
    ),
)


def apply_filters(
    records: Sequence[Mapping[str, Any]],
    filter_value: Optional[AdvanceBookingFilter] = None,
    search_text: Optional[str] = "",
) -> List[Mapping[str, Any]]:
    """
    Filter the advance booking list.

    Args:
        records: Tenant records as fetched (any status).
        filter_value: Live filter; None means unconstrained.
        search_text: Matches name, phone or room number.

    Returns:
        Advance bookings passing the filter, in input order.
    """
    return ADVANCE_BOOKING_PIPELINE.apply(
        records, filter_value or EMPTY_ADVANCE_BOOKING_FILTER, search_text
    )


def sort_advance_bookings(records: Sequence[Mapping[str, Any]]) -> List[Mapping[str, Any]]:
    """
    Order bookings for display: active bookings first, then newest booking
    date first. Records without a booking date sort last within their group.
    """
    newest_first = sorted(
        records,
        key=lambda r: parse_date(pick(r, "bookingDate")) or datetime.min,
        reverse=True,
    )
    return sorted(
        newest_first,
        key=lambda r: 0 if as_number(pick(r, "status")) == STATUS_ADVANCE_BOOKING else 1,
    )
