"""Filter value shapes shared by every list view.

A filter value is a plain record of facet key -> facet value. Checkbox
facets hold a list of selected option values (empty list = no constraint),
date facets hold a ``DateRange`` and custom facets hold whatever their
section stores. Each list view subclasses ``FilterValue`` with its own
fields; field names are the facet keys.
"""

import copy
import dataclasses
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

DateLike = Union[date, datetime]

F = TypeVar("F", bound="FilterValue")


def calendar_day(value: DateLike) -> date:
    """Wall-clock calendar day of a bound; aware datetimes are read in local time."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone().replace(tzinfo=None)
        return value.date()
    return value


def _encode_bound(value: Optional[DateLike]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def _decode_bound(value: Any) -> Optional[DateLike]:
    if value is None or value == "":
        return None
    if isinstance(value, (date, datetime)):
        return value
    text = str(value)
    if "T" in text or " " in text:
        return datetime.fromisoformat(text)
    return date.fromisoformat(text)


@dataclass(frozen=True)
class DateRange:
    """An optionally bounded date range. A missing bound is unbounded."""

    from_date: Optional[DateLike] = None
    to_date: Optional[DateLike] = None

    @property
    def is_set(self) -> bool:
        """True when at least one bound is present."""
        return self.from_date is not None or self.to_date is not None

    def normalized(self) -> "DateRange":
        """Return the range with bounds swapped if ``to`` falls before ``from``."""
        if self.from_date is not None and self.to_date is not None:
            if calendar_day(self.to_date) < calendar_day(self.from_date):
                return DateRange(from_date=self.to_date, to_date=self.from_date)
        return self

    def with_bound(self, which: str, value: Optional[DateLike]) -> "DateRange":
        """Return a copy with the ``"from"`` or ``"to"`` bound replaced."""
        if which == "from":
            return DateRange(from_date=value, to_date=self.to_date)
        if which == "to":
            return DateRange(from_date=self.from_date, to_date=value)
        raise ValueError(f"Unknown date bound: {which!r} (expected 'from' or 'to')")

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Convert to dictionary for storage."""
        return {"from": _encode_bound(self.from_date), "to": _encode_bound(self.to_date)}

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "DateRange":
        """Create from dictionary. Accepts ``from``/``to`` or a 2-item list."""
        if not data:
            return cls()
        if isinstance(data, (list, tuple)):
            start, end = (list(data) + [None, None])[:2]
            return cls(from_date=_decode_bound(start), to_date=_decode_bound(end))
        return cls(
            from_date=_decode_bound(data.get("from", data.get("from_date"))),
            to_date=_decode_bound(data.get("to", data.get("to_date"))),
        )

    def describe(self) -> str:
        """Human-readable form, e.g. ``2025-01-01 to ...``."""
        start = calendar_day(self.from_date).isoformat() if self.from_date is not None else "..."
        end = calendar_day(self.to_date).isoformat() if self.to_date is not None else "..."
        return f"{start} to {end}"


def is_facet_active(value: Any) -> bool:
    """
    Check whether a single facet value constrains anything.

    Lists are active when non-empty, date ranges when either bound is set,
    and custom values when truthy.
    """
    if isinstance(value, DateRange):
        return value.is_set
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) > 0
    return bool(value)


@dataclass
class FilterValue:
    """Base class for a list view's filter state."""

    @classmethod
    def facet_keys(cls) -> List[str]:
        """Facet keys in declaration order."""
        return [f.name for f in fields(cls)]

    @property
    def is_empty(self) -> bool:
        """Check if all facets are unconstrained (showing all data)."""
        return self.active_filter_count == 0

    @property
    def active_filter_count(self) -> int:
        """Count of facets that currently constrain the list."""
        return sum(1 for key in self.facet_keys() if is_facet_active(getattr(self, key)))

    def get_facet(self, key: str) -> Any:
        """Get one facet's value. Raises KeyError for unknown keys."""
        if key not in self.facet_keys():
            raise KeyError(key)
        return getattr(self, key)

    def with_facet(self: F, key: str, value: Any) -> F:
        """Return a new filter value with one facet replaced."""
        if key not in self.facet_keys():
            raise KeyError(key)
        return dataclasses.replace(self.copy(), **{key: value})

    def copy(self: F) -> F:
        """Create a deep copy of this filter value."""
        return copy.deepcopy(self)

    def get_summary(self) -> str:
        """Get a human-readable summary of active filters."""
        parts = []
        for key in self.facet_keys():
            value = getattr(self, key)
            if not is_facet_active(value):
                continue
            if isinstance(value, DateRange):
                parts.append(f"{key}: {value.describe()}")
            elif isinstance(value, (list, tuple)):
                if len(value) <= 3:
                    parts.append(f"{key}: {', '.join(str(v) for v in value)}")
                else:
                    parts.append(f"{key}: {len(value)} selected")
            else:
                parts.append(f"{key}: custom")
        return " | ".join(parts) if parts else "All records (no filters)"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage."""
        data: Dict[str, Any] = {}
        for key in self.facet_keys():
            value = getattr(self, key)
            if isinstance(value, DateRange):
                data[key] = value.to_dict()
            elif isinstance(value, (list, tuple)):
                data[key] = list(value)
            else:
                data[key] = copy.deepcopy(value)
        return data

    @classmethod
    def from_dict(cls: Type[F], data: Dict[str, Any]) -> F:
        """
        Create from dictionary.

        Missing keys keep the pristine default; unknown keys are ignored.
        """
        pristine = cls()
        kwargs: Dict[str, Any] = {}
        for key in cls.facet_keys():
            if key not in data:
                continue
            default = getattr(pristine, key)
            raw = data[key]
            if isinstance(default, DateRange):
                kwargs[key] = DateRange.from_dict(raw)
            elif isinstance(default, list):
                if raw is not None and not isinstance(raw, (list, tuple)):
                    raise ValueError(f"Facet {key} expects a list, got {type(raw).__name__}")
                kwargs[key] = list(raw or [])
            else:
                kwargs[key] = copy.deepcopy(raw)
        return cls(**kwargs)


def date_range_field() -> Any:
    """Dataclass field for a date facet, pristine value unbounded."""
    return field(default_factory=DateRange)


def checkbox_field() -> Any:
    """Dataclass field for a checkbox facet, pristine value ``[]``."""
    return field(default_factory=list)
