"""Summary statistics shown above the list views."""

import sys
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Sequence

import pandas as pd

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import (
    STATUS_ADVANCE_BOOKING,
    STATUS_BOOKING_CANCELLED,
    STATUS_BOOKING_EXPIRED,
    INTERIM_STATUS_ORDER,
)
from config.logging_config import get_logger

from filtering.predicates import parse_date
from filtering.records import as_number, pick

from .dues import classify_due_urgency
from .interim import is_interim, record_status

logger = get_logger("domains.stats")


@dataclass
class AdvanceBookingStats:
    """Header metrics for the advance booking view."""

    total: int = 0
    active: int = 0
    expired: int = 0
    cancelled: int = 0
    total_advance: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "active": self.active,
            "expired": self.expired,
            "cancelled": self.cancelled,
            "total_advance": self.total_advance,
        }


@dataclass
class DuesSummary:
    """Header metrics for the dues view."""

    count: int = 0
    total_amount: float = 0.0
    overdue_count: int = 0


def advance_booking_stats(records: Sequence[Mapping[str, Any]]) -> AdvanceBookingStats:
    """
    Count bookings by status and total the advance collected.

    Args:
        records: Booking records (normally the unfiltered list).

    Returns:
        AdvanceBookingStats; the advance is rent plus deposit paid.
    """
    if not records:
        return AdvanceBookingStats()

    df = pd.DataFrame(
        {
            "status": [as_number(pick(r, "status")) for r in records],
            "advance": [
                as_number(pick(r, "advanceRentAmountPaid"))
                + as_number(pick(r, "advanceDepositAmountPaid"))
                for r in records
            ],
        }
    )
    counts = df["status"].value_counts()

    return AdvanceBookingStats(
        total=len(df),
        active=int(counts.get(STATUS_ADVANCE_BOOKING, 0)),
        expired=int(counts.get(STATUS_BOOKING_EXPIRED, 0)),
        cancelled=int(counts.get(STATUS_BOOKING_CANCELLED, 0)),
        total_advance=float(df["advance"].sum()),
    )


def expense_total_for_day(
    records: Sequence[Mapping[str, Any]],
    day: Optional[date] = None,
) -> float:
    """Sum of expense amounts dated on ``day`` (default today)."""
    day = day or date.today()
    if not records:
        return 0.0

    df = pd.DataFrame(
        {
            "day": [_day_of(pick(r, "date")) for r in records],
            "amount": [as_number(pick(r, "amount")) for r in records],
        }
    )
    return float(df.loc[df["day"] == day, "amount"].sum())


def dues_summary(
    records: Sequence[Mapping[str, Any]],
    today: Optional[date] = None,
) -> DuesSummary:
    """
    Total and overdue count for a list of dues.

    Pass the filtered list: the header reflects what is on screen.
    """
    if not records:
        return DuesSummary()

    df = pd.DataFrame(
        {
            "amount": [as_number(pick(r, "amount")) for r in records],
            "urgency": [classify_due_urgency(pick(r, "dueDate"), today) for r in records],
        }
    )
    return DuesSummary(
        count=len(df),
        total_amount=float(df["amount"].sum()),
        overdue_count=int((df["urgency"] == "overdue").sum()),
    )


def interim_stats(
    records: Sequence[Mapping[str, Any]],
    today: Optional[date] = None,
) -> Dict[str, int]:
    """
    Count interim bookings per derived status.

    Returns:
        Dict with ``total`` plus one count per status (active, upcoming,
        expired). Records that are not interim bookings are ignored.
    """
    stays = [r for r in records or [] if is_interim(r)]
    result = {"total": len(stays)}
    result.update({status: 0 for status in INTERIM_STATUS_ORDER})
    if not stays:
        return result

    counts = pd.Series([record_status(r, today) for r in stays]).value_counts()
    for status, count in counts.items():
        result[status] = int(count)

    logger.debug(f"Interim stats: {result}")
    return result


def _day_of(value: Any) -> Optional[date]:
    parsed = parse_date(value)
    return parsed.date() if parsed is not None else None
