"""Pytest configuration and fixtures for PG filter engine tests."""

import pytest
from dataclasses import dataclass, field
from typing import Any, List

from filtering.filter_value import DateRange, FilterValue, checkbox_field, date_range_field
from filtering.sections import CheckboxOption, CheckboxSection, CustomSection, DateConfig, DateRangeSection


@pytest.fixture(autouse=True)
def lenient_sections(monkeypatch):
    """Run every test with strict section checking off unless it opts in."""
    from config import config

    monkeypatch.setattr(config.filters, "strict_sections", False)
    yield


@pytest.fixture
def strict_sections(monkeypatch):
    """Turn configuration problems into InvalidSectionError."""
    from config import config

    monkeypatch.setattr(config.filters, "strict_sections", True)
    yield


@dataclass
class SampleFilter(FilterValue):
    """Small filter shape used by engine-level tests."""

    color: List[str] = checkbox_field()
    size: List[int] = checkbox_field()
    created: DateRange = date_range_field()
    rent: Any = None


@pytest.fixture
def sample_filter_type():
    return SampleFilter


@pytest.fixture
def sample_sections():
    """Sections matching SampleFilter, one of each variant."""
    return [
        CheckboxSection(
            "color",
            "Color",
            options=(
                CheckboxOption("Red", "red"),
                CheckboxOption("Green", "green"),
                CheckboxOption("Blue", "blue"),
            ),
        ),
        CheckboxSection(
            "size",
            "Size",
            options=tuple(CheckboxOption(f"{n} Sharing", n) for n in range(1, 4)),
        ),
        DateRangeSection("created", "Created", date_config=DateConfig(allow_future=True)),
        CustomSection("rent", "Rent", render=lambda draft, set_draft: {"rent": draft.rent}),
    ]


@pytest.fixture
def tenant_records():
    """Tenant records as the backend sends them."""
    return [
        {"name": "Arun", "sharing": 2, "status": "Active", "joinedOn": "2025-02-01", "downloadedApp": True},
        {"name": "Priya", "sharing": 3, "status": "Dues", "joinedOn": "2025-05-01", "downloadedApp": False},
        {"name": "Anand", "sharing": 2, "status": "Under Notice", "joiningDate": "2025-03-15T18:30:00"},
        {"name": "Meena", "sharing": "1", "status": 1, "joinDate": "not a date"},
    ]


@pytest.fixture
def room_records():
    """Room records covering each status, floor format and facility mix."""
    return [
        {"roomNo": "101", "floor": "1F", "sharing": 2, "status": "Available", "facilities": ["AC", "WiFi"]},
        {"roomNo": "102", "floor": "1F", "sharing": 3, "status": "Partial", "facilities": ["WiFi"]},
        {"roomNo": "G01", "floor": "GF", "sharing": 1, "status": "Filled", "facilities": ["AC", "Geyser", "WiFi"]},
        {"roomNo": "201", "floor": "2nd Floor", "sharing": 2, "totalBeds": 2, "occupiedBeds": 1, "facilities": []},
    ]


@pytest.fixture
def booking_records():
    """Tenant records of every status; only 3/5/6 belong to advance booking."""
    return [
        {"tenantName": "Ravi", "phoneNumber": "9876500001", "roomNumber": "101", "status": 3,
         "bookingDate": "2025-06-10T10:00:00", "joiningDate": "2025-07-01",
         "advanceRentAmountPaid": 5000, "advanceDepositAmountPaid": 10000},
        {"name": "Sita", "phone": "9876500002", "room": "102", "status": "5",
         "bookingDate": "2025-05-01", "joinedOn": "2025-05-20",
         "advanceRentAmountPaid": 4000, "advanceDepositAmountPaid": 0},
        {"tenantName": "Kiran", "phoneNumber": "9876500003", "roomNumber": "201", "status": 6,
         "bookingDate": "2025-06-20", "joiningDate": "2025-08-01",
         "advanceRentAmountPaid": "3000", "advanceDepositAmountPaid": None},
        {"tenantName": "Active Tenant", "phoneNumber": "9876500004", "roomNumber": "101", "status": 1,
         "bookingDate": "2025-06-15", "joiningDate": "2025-07-01"},
        {"tenantName": "Lata", "phoneNumber": "9876500005", "roomNumber": "301", "status": 3,
         "bookingDate": "2025-06-25", "joiningDate": None},
    ]


@pytest.fixture
def expense_records():
    return [
        {"date": "26/07/2025", "amount": 25000, "category": "Groceries", "description": "Weekly vegetables and fruits"},
        {"date": "24/07/2025", "amount": 1200, "category": "Transport", "description": "Cab to airport"},
        {"date": "22/07/2025", "amount": 7800, "category": "Maintenance", "description": "AC service and filter replacement"},
        {"date": "26/07/2025", "amount": 300, "category": "Transport", "description": "Auto fare"},
    ]


@pytest.fixture
def due_records():
    """Payment records; status 2 is a pending due."""
    return [
        {"status": 2, "amount": 8000, "dueDate": "2025-06-01",
         "tenantDetails": {"name": "Arun", "roomNumber": "101", "phoneNumber": "9000000001"}},
        {"status": 2, "amount": 6500, "dueDate": "2025-06-12",
         "tenantDetails": {"name": "Priya", "roomNumber": "102", "phoneNumber": "9000000002"}},
        {"status": 1, "amount": 7000, "dueDate": "2025-06-05",
         "tenantDetails": {"name": "Paid Tenant", "roomNumber": "103", "phoneNumber": "9000000003"}},
        {"status": 2, "amount": 5000, "dueDate": "2025-09-01",
         "tenantDetails": {"name": "Kiran", "roomNumber": "201", "phoneNumber": "9000000004"}},
        {"status": 2, "amount": 4500, "dueDate": None,
         "tenantDetails": {"name": "Lata", "roomNumber": "301", "phoneNumber": "9000000005"}},
    ]


@pytest.fixture
def interim_records():
    """Status 7 short stays with UTC timestamps, plus one non-interim record."""
    return [
        # Joins 2025-06-10 IST (18:30 UTC on the 9th), leaves 2025-06-20
        {"tenantName": "Vikram", "phoneNumber": "9111100001", "roomNumber": "101", "status": 7,
         "joiningDate": "2025-06-09T18:30:00Z", "moveOutDate": "2025-06-20T05:00:00Z",
         "bookingDate": "2025-06-01T04:00:00Z"},
        {"tenantName": "Neha", "phoneNumber": "9111100002", "roomNumber": "102", "status": 7,
         "joiningDate": "2025-07-01T06:00:00Z", "moveOutDate": "2025-07-05T06:00:00Z",
         "bookingDate": "2025-06-05T20:00:00Z"},
        {"tenantName": "Omar", "phoneNumber": "9111100003", "roomNumber": "201", "status": 7,
         "joiningDate": "2025-05-01T06:00:00Z", "moveOutDate": "2025-05-03T06:00:00Z",
         "bookingDate": "2025-04-20T06:00:00Z"},
        {"tenantName": "Long Stay", "phoneNumber": "9111100004", "roomNumber": "101", "status": 1,
         "joiningDate": "2025-06-01T06:00:00Z", "moveOutDate": "2025-12-01T06:00:00Z"},
    ]
