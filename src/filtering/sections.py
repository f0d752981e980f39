"""Filter sheet sections: one per facet, one variant per UI affordance.

    sections = [
        CheckboxSection("status", "Room Status", options=(...)),
        DateRangeSection("joinDate", "Joining Date"),
        CustomSection("rent", "Rent", render=lambda draft, set_draft: ...),
    ]

The section list drives the sheet's tabs. Section keys must match the
fields of the list view's ``FilterValue``.
"""

import sys
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Sequence, Tuple, Type, Union

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import get_facet_options
from config.logging_config import get_logger

from .filter_value import DateRange, FilterValue

logger = get_logger("sections")


class SectionVariant(str, Enum):
    """The closed set of section variants."""

    CHECKBOX = "checkbox"
    DATE_RANGE = "date-range"
    CUSTOM = "custom"


@dataclass(frozen=True)
class CheckboxOption:
    """One tickable option. ``value`` is what gets stored in the filter."""

    label: str
    value: Any


@dataclass(frozen=True)
class DateConfig:
    """Date picker settings for a date-range section."""

    allow_future: bool = False
    from_label: str = "From"
    to_label: str = "To"


@dataclass(frozen=True)
class CheckboxSection:
    key: str
    label: str
    options: Tuple[CheckboxOption, ...] = ()

    @property
    def variant(self) -> SectionVariant:
        return SectionVariant.CHECKBOX

    @property
    def option_values(self) -> List[Any]:
        return [opt.value for opt in self.options]


@dataclass(frozen=True)
class DateRangeSection:
    key: str
    label: str
    date_config: DateConfig = field(default_factory=DateConfig)

    @property
    def variant(self) -> SectionVariant:
        return SectionVariant.DATE_RANGE


@dataclass(frozen=True)
class CustomSection:
    """
    A section that renders itself.

    ``render(draft, set_draft)`` gets full read/write access to the draft.
    The engine never reads or validates what it stores.
    """

    key: str
    label: str
    render: Callable[[Any, Callable[[Any], None]], Any]

    @property
    def variant(self) -> SectionVariant:
        return SectionVariant.CUSTOM


FacetSection = Union[CheckboxSection, DateRangeSection, CustomSection]


def validate_sections(
    sections: Sequence[FacetSection],
    value_type: Type[FilterValue],
) -> List[str]:
    """
    Check a section list against a filter value type.

    Args:
        sections: Sections passed to a filter sheet.
        value_type: The FilterValue subclass the sheet edits.

    Returns:
        List of problems found (empty if consistent).
    """
    problems: List[str] = []
    if not sections:
        problems.append("Section list is empty")
        return problems

    facet_keys = value_type.facet_keys()
    pristine = value_type()
    seen = set()

    for section in sections:
        if section.key in seen:
            problems.append(f"Duplicate section key: {section.key}")
        seen.add(section.key)

        if section.key not in facet_keys:
            problems.append(f"Section key not in {value_type.__name__}: {section.key}")
            continue

        default = getattr(pristine, section.key)
        if isinstance(section, CheckboxSection) and not isinstance(default, list):
            problems.append(f"Checkbox section {section.key} needs a list facet")
        elif isinstance(section, DateRangeSection) and not isinstance(default, DateRange):
            problems.append(f"Date section {section.key} needs a DateRange facet")

    for key in facet_keys:
        if key not in seen:
            problems.append(f"Facet has no section: {key}")

    return problems


def checkbox_section(domain: str, key: str) -> CheckboxSection:
    """Build a checkbox section from the domain's configured options."""
    facet_options = get_facet_options(domain)
    options = tuple(
        CheckboxOption(label=str(opt["label"]), value=opt["value"])
        for opt in facet_options.get_options(key)
    )
    if not options:
        logger.warning(f"No options configured for {domain}.{key}")
    return CheckboxSection(key=key, label=facet_options.get_label(key), options=options)


def date_range_section(domain: str, key: str) -> DateRangeSection:
    """Build a date-range section from the domain's configured settings."""
    facet_options = get_facet_options(domain)
    settings: Dict[str, Any] = facet_options.get_date_config(key)
    return DateRangeSection(
        key=key,
        label=facet_options.get_label(key),
        date_config=DateConfig(**settings),
    )


def find_section(sections: Iterable[FacetSection], key: str) -> Union[FacetSection, None]:
    """Return the section with the given key, or None."""
    for section in sections:
        if section.key == key:
            return section
    return None
