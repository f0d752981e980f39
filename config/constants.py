"""Constants for the PG filter engine.

Status codes come from the backend's tenant record. The same numeric field
drives which list view a record belongs to.
"""

from typing import Dict, FrozenSet

# =============================================================================
# Tenant status codes
# =============================================================================

STATUS_ACTIVE = 1
STATUS_DUES = 2
STATUS_ADVANCE_BOOKING = 3
STATUS_UNDER_NOTICE = 4
STATUS_BOOKING_EXPIRED = 5
STATUS_BOOKING_CANCELLED = 6
STATUS_INTERIM = 7

STATUS_NAMES: Dict[int, str] = {
    STATUS_ACTIVE: "Active",
    STATUS_DUES: "Dues",
    STATUS_ADVANCE_BOOKING: "Active Booking",
    STATUS_UNDER_NOTICE: "Under Notice",
    STATUS_BOOKING_EXPIRED: "Expired",
    STATUS_BOOKING_CANCELLED: "Cancelled",
    STATUS_INTERIM: "Interim",
}

# The advance booking view never shows anything outside these codes
ADVANCE_BOOKING_STATUSES: FrozenSet[int] = frozenset(
    {STATUS_ADVANCE_BOOKING, STATUS_BOOKING_EXPIRED, STATUS_BOOKING_CANCELLED}
)

# Due payments carry their own status field; 2 = pending
DUE_STATUS_PENDING = 2


# =============================================================================
# Domain keys (one persisted filter slot per list view)
# =============================================================================

DOMAIN_ROOMS = "rooms"
DOMAIN_TENANTS = "tenants"
DOMAIN_ADVANCE_BOOKING = "advance_booking"
DOMAIN_EXPENSES = "expenses"
DOMAIN_DUES = "dues"
DOMAIN_INTERIM = "interim"

DOMAIN_KEYS = (
    DOMAIN_ROOMS,
    DOMAIN_TENANTS,
    DOMAIN_ADVANCE_BOOKING,
    DOMAIN_EXPENSES,
    DOMAIN_DUES,
    DOMAIN_INTERIM,
)


# =============================================================================
# Derived labels
# =============================================================================

APP_DOWNLOADED = "App Downloaded"
APP_NOT_DOWNLOADED = "App Not Downloaded"

# Due urgency buckets, in display order
DUE_URGENCY_ORDER: Dict[str, int] = {
    "overdue": 0,
    "due-soon": 1,
    "upcoming": 2,
    "future": 3,
}

# Interim booking status, in display order
INTERIM_STATUS_ORDER: Dict[str, int] = {
    "active": 0,
    "upcoming": 1,
    "expired": 2,
}


def get_status_name(code: int) -> str:
    """Get display name for a tenant status code."""
    return STATUS_NAMES.get(code, str(code))


def app_download_label(downloaded: object) -> str:
    """Map the backend's downloaded-app flag onto the filter option label."""
    if isinstance(downloaded, str):
        if downloaded in (APP_DOWNLOADED, APP_NOT_DOWNLOADED):
            return downloaded
        downloaded = downloaded.strip().lower() in ("true", "1", "yes", "y")
    return APP_DOWNLOADED if downloaded else APP_NOT_DOWNLOADED
