"""List view filter definitions for the PG management app.

Usage:
    from domains import create_screen, session_store

    screen = create_screen("tenants", records, store=session_store())
    screen.set_search("an")
    rows = screen.visible_records
"""

from .rooms import RoomFilter, EMPTY_ROOM_FILTER, floor_code, room_status
from .tenants import TenantFilter, EMPTY_TENANT_FILTER, tenant_status
from .advance_booking import (
    AdvanceBookingFilter,
    EMPTY_ADVANCE_BOOKING_FILTER,
    sort_advance_bookings,
)
from .expenses import ExpenseFilter, EMPTY_EXPENSE_FILTER
from .dues import (
    DueFilter,
    EMPTY_DUE_FILTER,
    classify_due_urgency,
    days_overdue,
    sort_dues,
)
from .interim import (
    InterimFilter,
    EMPTY_INTERIM_FILTER,
    interim_booking_status,
    sort_interim,
)
from .registry import (
    DomainSpec,
    DOMAINS,
    FILTER_REGISTRY,
    get_domain,
    create_screen,
    session_store,
    json_store,
)
from .stats import (
    AdvanceBookingStats,
    DuesSummary,
    advance_booking_stats,
    expense_total_for_day,
    dues_summary,
    interim_stats,
)


__all__ = [
    # Rooms
    "RoomFilter",
    "EMPTY_ROOM_FILTER",
    "floor_code",
    "room_status",
    # Tenants
    "TenantFilter",
    "EMPTY_TENANT_FILTER",
    "tenant_status",
    # Advance booking
    "AdvanceBookingFilter",
    "EMPTY_ADVANCE_BOOKING_FILTER",
    "sort_advance_bookings",
    # Expenses
    "ExpenseFilter",
    "EMPTY_EXPENSE_FILTER",
    # Dues
    "DueFilter",
    "EMPTY_DUE_FILTER",
    "classify_due_urgency",
    "days_overdue",
    "sort_dues",
    # Interim
    "InterimFilter",
    "EMPTY_INTERIM_FILTER",
    "interim_booking_status",
    "sort_interim",
    # Registry
    "DomainSpec",
    "DOMAINS",
    "FILTER_REGISTRY",
    "get_domain",
    "create_screen",
    "session_store",
    "json_store",
    # Stats
    "AdvanceBookingStats",
    "DuesSummary",
    "advance_booking_stats",
    "expense_total_for_day",
    "dues_summary",
    "interim_stats",
]
