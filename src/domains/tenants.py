"""Tenants list view: filter shape, sections and pipeline."""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import DOMAIN_TENANTS, STATUS_NAMES, app_download_label

from filtering.filter_value import DateRange, FilterValue, checkbox_field, date_range_field
from filtering.pipeline import DateFacet, FilterPipeline, MembershipFacet
from filtering.predicates import pick_date
from filtering.records import as_number, as_text, pick
from filtering.sections import FacetSection, checkbox_section, date_range_section

# Backend field names seen for the joining date, in priority order
JOIN_DATE_FIELDS = ("joinedOn", "joiningDate", "joinDate")


@dataclass
class TenantFilter(FilterValue):
    sharing: List[int] = checkbox_field()
    status: List[str] = checkbox_field()
    join_date: DateRange = date_range_field()
    downloaded_app: List[str] = checkbox_field()


EMPTY_TENANT_FILTER = TenantFilter()


def tenant_status(value: Any) -> str:
    """
    Normalize a tenant status to its display label.

    Numeric codes (``1``, ``"4"``) map through the status table; labels pass
    through unchanged.
    """
    code = as_number(value, None)
    if isinstance(code, int) and code in STATUS_NAMES:
        return STATUS_NAMES[code]
    return as_text(value).strip()


def _sharing(value: Any) -> Any:
    return as_number(value, value)


def build_sections() -> List[FacetSection]:
    """Filter sheet sections for the tenants view, in tab order."""
    return [
        checkbox_section(DOMAIN_TENANTS, "sharing"),
        checkbox_section(DOMAIN_TENANTS, "status"),
        date_range_section(DOMAIN_TENANTS, "join_date"),
        checkbox_section(DOMAIN_TENANTS, "downloaded_app"),
    ]


TENANT_PIPELINE: FilterPipeline[TenantFilter] = FilterPipeline(
    name=DOMAIN_TENANTS,
    search_fields=(lambda r: pick(r, "name", "tenantName"),),
    membership=(
        MembershipFacet("sharing", lambda r: pick(r, "sharing", "sharingType"), _sharing),
        MembershipFacet("status", lambda r: pick(r, "status"), tenant_status),
        MembershipFacet(
            "downloaded_app",
            lambda r: app_download_label(pick(r, "downloadedApp", "downloaded", default=False)),
        ),
    ),
    dates=(
        DateFacet("join_date", lambda r: pick_date(r, *JOIN_DATE_FIELDS)),
    ),
)


def apply_filters(
    records: Sequence[Mapping[str, Any]],
    filter_value: Optional[TenantFilter] = None,
    search_text: Optional[str] = "",
) -> List[Mapping[str, Any]]:
    """
    Filter the tenants list.

    Args:
        records: Tenant records as fetched.
        filter_value: Live filter; None means unconstrained.
        search_text: Matches the tenant's name.

    Returns:
        Matching tenants in input order.
    """
    return TENANT_PIPELINE.apply(records, filter_value or EMPTY_TENANT_FILTER, search_text)
