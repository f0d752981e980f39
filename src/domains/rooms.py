"""Rooms list view: filter shape, sections and pipeline.

Search matches room number or floor. Checkbox facets cover room status,
sharing, floor and facilities; facilities must contain every selected
option.
"""

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import DOMAIN_ROOMS
from config.logging_config import get_logger

from filtering.filter_value import FilterValue, checkbox_field
from filtering.pipeline import FilterPipeline, MembershipFacet
from filtering.predicates import contains_all
from filtering.records import as_number, as_text, pick
from filtering.sections import FacetSection, checkbox_section

logger = get_logger("domains.rooms")

ROOM_STATUSES = ("Available", "Partial", "Filled")

_GROUND_FLOOR = {"G", "GF", "GROUND", "GROUND FLOOR", "0", "0F"}
_FLOOR_NUMBER = re.compile(r"^(\d+)")


@dataclass
class RoomFilter(FilterValue):
    status: List[str] = checkbox_field()
    sharing: List[int] = checkbox_field()
    floor: List[str] = checkbox_field()
    facilities: List[str] = checkbox_field()


EMPTY_ROOM_FILTER = RoomFilter()


def floor_code(value: Any) -> str:
    """
    Normalize a floor to the option code used by the filter sheet.

    ``"Ground Floor"``, ``"G"`` and ``0`` become ``"GF"``; ``"1st Floor"``,
    ``"1"`` and ``1`` become ``"1F"``. Anything else is returned trimmed.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (int, float)):
        number = int(value)
        return "GF" if number == 0 else f"{number}F"

    text = str(value).strip()
    if text.upper() in _GROUND_FLOOR:
        return "GF"
    match = _FLOOR_NUMBER.match(text)
    if match:
        number = int(match.group(1))
        return "GF" if number == 0 else f"{number}F"
    return text


def room_status(record: Mapping[str, Any]) -> str:
    """
    Get a room's occupancy status.

    Uses the record's ``status`` when it is one of the known labels,
    otherwise derives it from bed counts.
    """
    status = as_text(pick(record, "status", "roomStatus")).strip().title()
    if status in ROOM_STATUSES:
        return status

    total = as_number(pick(record, "totalBeds", "sharing", "sharingType"), 0)
    occupied = pick(record, "occupiedBeds", "filledBeds")
    if occupied is None:
        available = pick(record, "bedsAvailable", "availableBeds")
        if available is None:
            logger.debug(f"Room {pick(record, 'roomNo')} has no status or bed counts")
            return status
        occupied = total - as_number(available, 0)
    occupied = as_number(occupied, 0)

    if occupied <= 0:
        return "Available"
    if total and occupied >= total:
        return "Filled"
    return "Partial"


def _sharing(value: Any) -> Any:
    return as_number(value, value)


def build_sections() -> List[FacetSection]:
    """Filter sheet sections for the rooms view, in tab order."""
    return [
        checkbox_section(DOMAIN_ROOMS, "status"),
        checkbox_section(DOMAIN_ROOMS, "sharing"),
        checkbox_section(DOMAIN_ROOMS, "floor"),
        checkbox_section(DOMAIN_ROOMS, "facilities"),
    ]


ROOM_PIPELINE: FilterPipeline[RoomFilter] = FilterPipeline(
    name=DOMAIN_ROOMS,
    search_fields=(
        lambda r: pick(r, "roomNo", "roomNumber"),
        lambda r: pick(r, "floor"),
    ),
    membership=(
        MembershipFacet("status", room_status),
        MembershipFacet("sharing", lambda r: pick(r, "sharing", "sharingType"), _sharing),
        MembershipFacet("floor", lambda r: pick(r, "floor"), floor_code),
        MembershipFacet(
            "facilities",
            lambda r: pick(r, "facilities", default=[]),
            match=contains_all,
        ),
    ),
)


def apply_filters(
    records: Sequence[Mapping[str, Any]],
    filter_value: Optional[RoomFilter] = None,
    search_text: Optional[str] = "",
) -> List[Mapping[str, Any]]:
    """
    Filter the rooms list.

    Args:
        records: Room records as fetched.
        filter_value: Live filter; None means unconstrained.
        search_text: Matches room number or floor.

    Returns:
        Matching rooms in input order.
    """
    return ROOM_PIPELINE.apply(records, filter_value or EMPTY_ROOM_FILTER, search_text)
