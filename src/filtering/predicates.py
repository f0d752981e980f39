"""Predicate primitives used by every list view's filter pipeline.

All functions are pure. The one rule that matters most: an empty selection
never filters anything out.
"""

import sys
from datetime import date, datetime, time, timedelta, timezone
from pathlib import Path
from typing import Any, Collection, Iterable, Optional

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import get_date_formats
from config.logging_config import get_logger

from .filter_value import DateLike, DateRange, calendar_day

logger = get_logger("predicates")

# Placeholder strings the backend sends instead of a date
_NON_DATES = {"", "NA", "N/A", "NULL", "NONE", "UNDEFINED", "INVALID DATE"}


def text_matches(haystack: Any, needle: Optional[str]) -> bool:
    """
    Case-insensitive substring match.

    An empty (or whitespace-only) needle matches everything: search is
    optional, not a filter.
    """
    query = (needle or "").strip().casefold()
    if not query:
        return True
    text = "" if haystack is None else str(haystack)
    return query in text.casefold()


def any_text_matches(haystacks: Iterable[Any], needle: Optional[str]) -> bool:
    """True if the needle matches at least one of the given fields."""
    query = (needle or "").strip()
    if not query:
        return True
    return any(text_matches(h, query) for h in haystacks)


def in_set(value: Any, selected: Collection[Any]) -> bool:
    """
    Membership test for a checkbox facet.

    Args:
        value: The record's field value.
        selected: Option values ticked in the filter sheet.

    Returns:
        True if nothing is selected (unconstrained) or value is selected.
    """
    if not selected:
        return True
    return value in selected


def contains_all(values: Optional[Iterable[Any]], selected: Collection[Any]) -> bool:
    """
    Membership test for a multi-valued field (e.g. room facilities).

    Every selected option must be present on the record. Empty selection is
    unconstrained.
    """
    if not selected:
        return True
    if values is None:
        return False
    present = list(values)
    return all(v in present for v in selected)


def _to_wall_time(moment: datetime, utc_offset: Optional[timedelta]) -> datetime:
    """Drop tzinfo, converting to local time or to a fixed offset first."""
    if moment.tzinfo is None:
        return moment
    if utc_offset is not None:
        return moment.astimezone(timezone(utc_offset)).replace(tzinfo=None)
    return moment.astimezone().replace(tzinfo=None)


def _parse_date_string(text: str) -> Optional[datetime]:
    text = text.strip()
    if text.upper() in _NON_DATES:
        return None

    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    for fmt in get_date_formats():
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    logger.debug(f"Could not parse date: {text}")
    return None


def parse_date(value: Any, utc_offset: Optional[timedelta] = None) -> Optional[datetime]:
    """
    Parse a record's date field into a naive wall-clock datetime.

    Args:
        value: datetime, date, ISO-8601 string, configured non-ISO string
            (``26/07/2025``) or epoch milliseconds.
        utc_offset: When given, timezone-aware values are converted to this
            fixed offset instead of the machine's local time.

    Returns:
        Naive datetime, or None if the value is missing or unparseable.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        parsed: Optional[datetime] = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, (int, float)):
        if value != value:  # NaN
            return None
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.debug(f"Could not parse epoch date: {value}")
            return None
    elif isinstance(value, str):
        parsed = _parse_date_string(value)
    else:
        return None

    if parsed is None:
        return None
    return _to_wall_time(parsed, utc_offset)


def start_of_day(value: DateLike) -> datetime:
    """00:00:00.000000 on the given day."""
    return datetime.combine(calendar_day(value), time.min)


def end_of_day(value: DateLike) -> datetime:
    """23:59:59.999999 on the given day."""
    return datetime.combine(calendar_day(value), time.max)


def normalize_range(date_range: DateRange) -> DateRange:
    """Swap inverted bounds so ``from`` is never after ``to``."""
    normalized = date_range.normalized()
    if normalized is not date_range:
        logger.debug(f"Swapped inverted date range: {date_range.describe()}")
    return normalized


def date_in_range(
    candidate: Any,
    date_range: DateRange,
    utc_offset: Optional[timedelta] = None,
) -> bool:
    """
    Inclusive date-range containment at day granularity.

    ``from`` expands to the start of its day and ``to`` to the end of its
    day, so any record timestamped on a selected day matches. A candidate
    that is missing or unparseable never matches an active range. An unset
    range matches everything; pipelines skip calling it in that case.

    Args:
        candidate: Raw record value or datetime.
        date_range: Range selected in the filter sheet.
        utc_offset: Passed through to ``parse_date``.

    Returns:
        True if the candidate falls inside the range.
    """
    if not date_range.is_set:
        return True

    moment = parse_date(candidate, utc_offset)
    if moment is None:
        return False

    bounds = normalize_range(date_range)
    if bounds.from_date is not None and moment < start_of_day(bounds.from_date):
        return False
    if bounds.to_date is not None and moment > end_of_day(bounds.to_date):
        return False
    return True


def pick_date(
    record: Any,
    *keys: str,
    utc_offset: Optional[timedelta] = None,
) -> Optional[datetime]:
    """Parse the first of ``keys`` that holds a usable date, else None."""
    if not record:
        return None
    for key in keys:
        parsed = parse_date(record.get(key), utc_offset)
        if parsed is not None:
            return parsed
    return None
