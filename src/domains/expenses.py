"""Expenses list view: search on category/description plus one date range."""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence

PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import DOMAIN_EXPENSES

from filtering.filter_value import DateRange, FilterValue, date_range_field
from filtering.pipeline import DateFacet, FilterPipeline
from filtering.records import pick
from filtering.sections import FacetSection, date_range_section


@dataclass
class ExpenseFilter(FilterValue):
    date_range: DateRange = date_range_field()


EMPTY_EXPENSE_FILTER = ExpenseFilter()


def build_sections() -> List[FacetSection]:
    return [date_range_section(DOMAIN_EXPENSES, "date_range")]


EXPENSE_PIPELINE: FilterPipeline[ExpenseFilter] = FilterPipeline(
    name=DOMAIN_EXPENSES,
    search_fields=(
        lambda r: pick(r, "category"),
        lambda r: pick(r, "description"),
    ),
    dates=(DateFacet("date_range", lambda r: pick(r, "date")),),
)


def apply_filters(
    records: Sequence[Mapping[str, Any]],
    filter_value: Optional[ExpenseFilter] = None,
    search_text: Optional[str] = "",
) -> List[Mapping[str, Any]]:
    """Filter the expenses list, keeping input order."""
    return EXPENSE_PIPELINE.apply(records, filter_value or EMPTY_EXPENSE_FILTER, search_text)
