"""Client-side faceted filter engine.

Usage:
    from filtering import FilterScreen, FilterSheet, FilterPipeline

    pipeline = FilterPipeline(name="rooms", search_fields=[...], membership=[...])
    visible = pipeline.apply(records, live_filter, search_text)
"""

from .exceptions import (
    FilterEngineError,
    SheetStateError,
    InvalidSectionError,
    FilterStoreError,
)
from .filter_value import (
    DateRange,
    FilterValue,
    is_facet_active,
    checkbox_field,
    date_range_field,
)
from .predicates import (
    text_matches,
    any_text_matches,
    in_set,
    contains_all,
    parse_date,
    start_of_day,
    end_of_day,
    normalize_range,
    date_in_range,
    pick_date,
)
from .records import pick, as_text, as_number
from .sections import (
    SectionVariant,
    CheckboxOption,
    DateConfig,
    CheckboxSection,
    DateRangeSection,
    CustomSection,
    FacetSection,
    validate_sections,
    checkbox_section,
    date_range_section,
    find_section,
)
from .sheet import FilterSheet, SheetState
from .pipeline import FilterPipeline, MembershipFacet, DateFacet
from .store import (
    FilterStore,
    InMemoryFilterStore,
    SnapshotFilterStore,
    SessionFilterStore,
    JsonFileFilterStore,
)
from .screen import FilterScreen


__all__ = [
    # Errors
    "FilterEngineError",
    "SheetStateError",
    "InvalidSectionError",
    "FilterStoreError",
    # Values
    "DateRange",
    "FilterValue",
    "is_facet_active",
    "checkbox_field",
    "date_range_field",
    # Predicates
    "text_matches",
    "any_text_matches",
    "in_set",
    "contains_all",
    "parse_date",
    "start_of_day",
    "end_of_day",
    "normalize_range",
    "date_in_range",
    "pick_date",
    # Record access
    "pick",
    "as_text",
    "as_number",
    # Sections
    "SectionVariant",
    "CheckboxOption",
    "DateConfig",
    "CheckboxSection",
    "DateRangeSection",
    "CustomSection",
    "FacetSection",
    "validate_sections",
    "checkbox_section",
    "date_range_section",
    "find_section",
    # Sheet
    "FilterSheet",
    "SheetState",
    # Pipeline
    "FilterPipeline",
    "MembershipFacet",
    "DateFacet",
    # Stores
    "FilterStore",
    "InMemoryFilterStore",
    "SnapshotFilterStore",
    "SessionFilterStore",
    "JsonFileFilterStore",
    # Screen
    "FilterScreen",
]
