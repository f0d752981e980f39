"""Filter sheet engine.

The sheet edits a private draft of the live filter value and commits it
only through ``apply()``. Dismissing the sheet throws the draft away, so a
user can try several facet combinations and cancel out cleanly.

State machine::

    CLOSED --open--> BROWSING --edit--> DIRTY
    BROWSING/DIRTY --clear_all/edit--> BROWSING or DIRTY (draft vs opened value)
    BROWSING/DIRTY --apply--> COMMITTING --on_change, on_close--> CLOSED
    BROWSING/DIRTY --dismiss--> CLOSED (no on_change)
"""

import sys
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Generic, Optional, Sequence, Type, TypeVar, Union

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import get_logger

from .exceptions import InvalidSectionError, SheetStateError
from .filter_value import DateLike, DateRange, FilterValue
from .sections import (
    CheckboxSection,
    CustomSection,
    DateRangeSection,
    FacetSection,
    find_section,
    validate_sections,
)

logger = get_logger("sheet")

F = TypeVar("F", bound=FilterValue)

DraftUpdate = Union[F, Callable[[F], F]]


class SheetState(str, Enum):
    """Lifecycle states of a filter sheet."""

    CLOSED = "closed"
    BROWSING = "browsing"
    DIRTY = "dirty"
    COMMITTING = "committing"


_OPEN_STATES = (SheetState.BROWSING, SheetState.DIRTY)


class FilterSheet(Generic[F]):
    """
    Draft/commit editor for one list view's filter value.

    Args:
        sections: Tabs shown in the sheet, first one active on open.
        reset_value: Pristine filter value used by ``clear_all()``.
        on_change: Receives the committed draft when the user applies.
        on_close: Called whenever the sheet closes (apply or dismiss).
    """

    def __init__(
        self,
        sections: Sequence[FacetSection],
        reset_value: F,
        on_change: Callable[[F], None],
        on_close: Optional[Callable[[], None]] = None,
    ):
        if not sections:
            raise InvalidSectionError("A filter sheet needs at least one section")

        self._sections = tuple(sections)
        self._reset_value = reset_value.copy()
        self._value_type: Type[F] = type(reset_value)
        self._on_change = on_change
        self._on_close = on_close

        self._state = SheetState.CLOSED
        self._draft: Optional[F] = None
        self._opened_with: Optional[F] = None
        self._active_key: Optional[str] = None

        for problem in validate_sections(self._sections, self._value_type):
            self._config_problem(problem)

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def state(self) -> SheetState:
        return self._state

    @property
    def visible(self) -> bool:
        return self._state != SheetState.CLOSED

    @property
    def sections(self) -> tuple:
        return self._sections

    @property
    def draft(self) -> Optional[F]:
        """The working draft, or None while closed."""
        return self._draft

    @property
    def active_section_key(self) -> Optional[str]:
        return self._active_key

    @property
    def active_section(self) -> Optional[FacetSection]:
        if self._active_key is None:
            return None
        return find_section(self._sections, self._active_key)

    @property
    def is_dirty(self) -> bool:
        """True if the draft differs from the value the sheet was opened with."""
        return self._state == SheetState.DIRTY

    def is_checked(self, facet_key: str, option_value: Any) -> bool:
        """Whether a checkbox option is ticked in the draft."""
        if self._draft is None or facet_key not in self._value_type.facet_keys():
            return False
        selected = getattr(self._draft, facet_key)
        return isinstance(selected, list) and option_value in selected

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def open(self, value: F) -> None:
        """Open the sheet on a deep copy of the live filter value."""
        if self._state != SheetState.CLOSED:
            raise SheetStateError(f"Cannot open a sheet that is {self._state.value}")
        if not isinstance(value, self._value_type):
            raise TypeError(
                f"Expected {self._value_type.__name__}, got {type(value).__name__}"
            )

        self._draft = value.copy()
        self._opened_with = value.copy()
        self._active_key = self._sections[0].key
        self._state = SheetState.BROWSING
        logger.debug(f"Opened {self._value_type.__name__} sheet: {value.get_summary()}")

    def select_tab(self, key: str) -> None:
        """Switch the active section. Never touches the draft."""
        self._require_open("select_tab")
        if find_section(self._sections, key) is None:
            self._config_problem(f"Unknown section: {key}")
            return
        self._active_key = key

    def toggle_checkbox(self, facet_key: str, option_value: Any) -> None:
        """Tick an unticked option or untick a ticked one."""
        self._require_open("toggle_checkbox")
        if self._section_for(facet_key, CheckboxSection) is None:
            return

        current = getattr(self._draft, facet_key)
        selected = list(current) if isinstance(current, (list, tuple)) else []
        if option_value in selected:
            selected = [v for v in selected if v != option_value]
        else:
            selected.append(option_value)
        self._replace_draft(self._draft.with_facet(facet_key, selected))

    def set_date_bound(self, facet_key: str, which: str, value: Optional[DateLike]) -> None:
        """
        Set or clear one bound of a date facet in the draft.

        Args:
            facet_key: Date facet to edit.
            which: ``"from"`` or ``"to"``.
            value: New bound, or None to clear it.
        """
        self._require_open("set_date_bound")
        if which not in ("from", "to"):
            raise ValueError(f"Unknown date bound: {which!r} (expected 'from' or 'to')")

        section = self._section_for(facet_key, DateRangeSection)
        if section is None:
            return

        if value is not None and not section.date_config.allow_future:
            value = _clamp_to_today(value)

        current = getattr(self._draft, facet_key)
        if not isinstance(current, DateRange):
            current = DateRange()
        self._replace_draft(self._draft.with_facet(facet_key, current.with_bound(which, value)))

    def set_draft(self, update: DraftUpdate) -> None:
        """
        Replace the draft wholesale.

        This is the write path handed to custom sections; ``update`` may be a
        new value or a function of the current draft.
        """
        self._require_open("set_draft")
        next_value = update(self._draft.copy()) if callable(update) else update
        if not isinstance(next_value, self._value_type):
            self._config_problem(
                f"set_draft expected {self._value_type.__name__}, "
                f"got {type(next_value).__name__}"
            )
            return
        self._replace_draft(next_value.copy())

    def clear_all(self) -> None:
        """Reset the draft to the pristine value. Stays open, commits nothing."""
        self._require_open("clear_all")
        self._replace_draft(self._reset_value.copy())
        self._active_key = self._active_key or self._sections[0].key

    def apply(self) -> None:
        """Commit the draft: on_change(draft), then on_close(), then CLOSED."""
        self._require_open("apply")
        committed = self._draft.copy()
        self._state = SheetState.COMMITTING
        try:
            logger.debug(f"Applying {self._value_type.__name__}: {committed.get_summary()}")
            self._on_change(committed)
            if self._on_close is not None:
                self._on_close()
        finally:
            self._reset_to_closed()

    def dismiss(self) -> None:
        """Close without committing. All draft edits are discarded."""
        if self._state == SheetState.CLOSED:
            return
        if self._state == SheetState.COMMITTING:
            raise SheetStateError("Cannot dismiss a sheet while it is committing")

        was_dirty = self._state == SheetState.DIRTY
        self._reset_to_closed()
        if was_dirty:
            logger.debug(f"Discarded {self._value_type.__name__} draft")
        if self._on_close is not None:
            self._on_close()

    # ------------------------------------------------------------------
    # Rendering support
    # ------------------------------------------------------------------

    def render_custom(self, key: Optional[str] = None) -> Any:
        """Call a custom section's ``render(draft, set_draft)``."""
        self._require_open("render_custom")
        section = self._section_for(key or self._active_key, CustomSection)
        if section is None:
            return None
        return section.render(self._draft.copy(), self.set_draft)

    def active_section_view(self) -> Dict[str, Any]:
        """
        Describe the active section for a renderer.

        Checkbox sections list their options with a ``checked`` flag, date
        sections carry the draft range and picker settings, and custom
        sections carry whatever their ``render`` returned.
        """
        self._require_open("active_section_view")
        section = self.active_section
        view: Dict[str, Any] = {
            "key": section.key,
            "label": section.label,
            "variant": section.variant.value,
        }

        if isinstance(section, CheckboxSection):
            view["options"] = [
                {
                    "label": opt.label,
                    "value": opt.value,
                    "checked": self.is_checked(section.key, opt.value),
                }
                for opt in section.options
            ]
        elif isinstance(section, DateRangeSection):
            current = getattr(self._draft, section.key, DateRange())
            view["range"] = current if isinstance(current, DateRange) else DateRange()
            view["date_config"] = section.date_config
        else:
            view["content"] = self.render_custom(section.key)

        return view

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_open(self, operation: str) -> None:
        if self._state not in _OPEN_STATES:
            raise SheetStateError(f"Cannot {operation} while the sheet is {self._state.value}")

    def _section_for(self, key: Optional[str], expected: type) -> Optional[FacetSection]:
        section = find_section(self._sections, key) if key else None
        if section is None:
            self._config_problem(f"Unknown section: {key}")
            return None
        if not isinstance(section, expected):
            self._config_problem(
                f"Section {key} is {section.variant.value}, not {expected.__name__}"
            )
            return None
        if key not in self._value_type.facet_keys():
            self._config_problem(f"Section {key} has no facet in {self._value_type.__name__}")
            return None
        return section

    def _replace_draft(self, value: F) -> None:
        self._draft = value
        self._state = SheetState.DIRTY if value != self._opened_with else SheetState.BROWSING

    def _reset_to_closed(self) -> None:
        self._draft = None
        self._opened_with = None
        self._active_key = None
        self._state = SheetState.CLOSED

    def _config_problem(self, message: str) -> None:
        if config.filters.strict_sections:
            raise InvalidSectionError(message)
        logger.warning(message)


def _clamp_to_today(value: DateLike) -> DateLike:
    today = date.today()
    day = value.date() if isinstance(value, datetime) else value
    if day <= today:
        return value
    logger.debug(f"Clamped future date {day.isoformat()} to today")
    return today
