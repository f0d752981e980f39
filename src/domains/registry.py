"""Registry of list views and their filter wiring.

Each list view is described by a ``DomainSpec``; ``create_screen`` turns one
into a ready-to-use ``FilterScreen``.
"""

import sys
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Type

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import (
    DOMAIN_ADVANCE_BOOKING,
    DOMAIN_DUES,
    DOMAIN_EXPENSES,
    DOMAIN_INTERIM,
    DOMAIN_ROOMS,
    DOMAIN_TENANTS,
)
from config.logging_config import get_logger

from filtering.exceptions import FilterEngineError
from filtering.filter_value import FilterValue
from filtering.screen import FilterScreen
from filtering.sections import FacetSection
from filtering.store import FilterStore, JsonFileFilterStore, SessionFilterStore

from . import advance_booking, dues, expenses, interim, rooms, tenants

logger = get_logger("domains.registry")


@dataclass(frozen=True)
class DomainSpec:
    """Everything a hosting screen needs to filter one list view."""

    key: str
    label: str
    filter_type: Type[FilterValue]
    empty_value: FilterValue
    build_sections: Callable[[], List[FacetSection]]
    apply_filters: Callable[..., List[Mapping[str, Any]]]
    # Results change with the current day (derived status), not just the inputs
    depends_on_day: bool = False


DOMAINS: Dict[str, DomainSpec] = {
    DOMAIN_ROOMS: DomainSpec(
        key=DOMAIN_ROOMS,
        label="Rooms",
        filter_type=rooms.RoomFilter,
        empty_value=rooms.EMPTY_ROOM_FILTER,
        build_sections=rooms.build_sections,
        apply_filters=rooms.apply_filters,
    ),
    DOMAIN_TENANTS: DomainSpec(
        key=DOMAIN_TENANTS,
        label="Tenants",
        filter_type=tenants.TenantFilter,
        empty_value=tenants.EMPTY_TENANT_FILTER,
        build_sections=tenants.build_sections,
        apply_filters=tenants.apply_filters,
    ),
    DOMAIN_ADVANCE_BOOKING: DomainSpec(
        key=DOMAIN_ADVANCE_BOOKING,
        label="Advance Booking",
        filter_type=advance_booking.AdvanceBookingFilter,
        empty_value=advance_booking.EMPTY_ADVANCE_BOOKING_FILTER,
        build_sections=advance_booking.build_sections,
        apply_filters=advance_booking.apply_filters,
    ),
    DOMAIN_EXPENSES: DomainSpec(
        key=DOMAIN_EXPENSES,
        label="Expenses",
        filter_type=expenses.ExpenseFilter,
        empty_value=expenses.EMPTY_EXPENSE_FILTER,
        build_sections=expenses.build_sections,
        apply_filters=expenses.apply_filters,
    ),
    DOMAIN_DUES: DomainSpec(
        key=DOMAIN_DUES,
        label="Dues",
        filter_type=dues.DueFilter,
        empty_value=dues.EMPTY_DUE_FILTER,
        build_sections=dues.build_sections,
        apply_filters=dues.apply_filters,
    ),
    DOMAIN_INTERIM: DomainSpec(
        key=DOMAIN_INTERIM,
        label="Interim Bookings",
        filter_type=interim.InterimFilter,
        empty_value=interim.EMPTY_INTERIM_FILTER,
        build_sections=interim.build_sections,
        apply_filters=interim.apply_filters,
        depends_on_day=True,
    ),
}

# Domain key -> filter type, as the snapshot stores expect it
FILTER_REGISTRY: Dict[str, Type[FilterValue]] = {
    key: domain.filter_type for key, domain in DOMAINS.items()
}


def get_domain(domain_key: str) -> DomainSpec:
    """
    Look up a list view by key.

    Raises:
        FilterEngineError: If the key is not registered.
    """
    try:
        return DOMAINS[domain_key]
    except KeyError:
        raise FilterEngineError(
            f"Unknown filter domain: {domain_key} (expected one of {', '.join(DOMAINS)})"
        )


def create_screen(
    domain_key: str,
    records: Optional[Sequence[Mapping[str, Any]]] = None,
    store: Optional[FilterStore] = None,
    clock: Callable[[], date] = date.today,
) -> FilterScreen:
    """
    Build the filter screen controller for a list view.

    Args:
        domain_key: One of the registered domain keys.
        records: Initial records.
        store: Optional store to seed the live filter from and write to.
        clock: Reference-day source, used only by day-dependent views.

    Returns:
        FilterScreen wired to the domain's sections and pipeline.
    """
    domain = get_domain(domain_key)
    logger.debug(f"Creating {domain.label} filter screen ({len(records or [])} records)")
    return FilterScreen(
        domain_key=domain.key,
        sections=domain.build_sections(),
        empty_value=domain.empty_value,
        apply_filters=domain.apply_filters,
        records=records,
        store=store,
        clock=clock if domain.depends_on_day else None,
    )


def session_store(session_state=None) -> SessionFilterStore:
    """Filter store over Streamlit session state for every registered view."""
    return SessionFilterStore(FILTER_REGISTRY, session_state)


def json_store(path: Optional[Path] = None) -> JsonFileFilterStore:
    """Filter store over a JSON file for every registered view."""
    return JsonFileFilterStore(FILTER_REGISTRY, path)
