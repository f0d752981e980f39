"""Tests for the advance booking list view."""

from datetime import date


def _names(records):
    return [r.get("tenantName") or r.get("name") for r in records]


class TestAdvanceBookingFilters:
    """Tests for advance booking apply_filters."""

    def test_base_status_invariant(self, booking_records):
        """Test status 1 tenants never appear, even unfiltered."""
        from domains.advance_booking import EMPTY_ADVANCE_BOOKING_FILTER, apply_filters

        result = apply_filters(booking_records, EMPTY_ADVANCE_BOOKING_FILTER, "")

        assert "Active Tenant" not in _names(result)
        assert _names(result) == ["Ravi", "Sita", "Kiran", "Lata"]

    def test_base_invariant_survives_search(self, booking_records):
        """Test searching for the excluded tenant still finds nothing."""
        from domains.advance_booking import apply_filters

        assert apply_filters(booking_records, search_text="Active Tenant") == []
        assert apply_filters(booking_records, search_text="9876500004") == []

    def test_status_facet_is_numeric(self, booking_records):
        """Test status codes match whether sent as int or string."""
        from domains.advance_booking import AdvanceBookingFilter, apply_filters

        assert _names(apply_filters(booking_records, AdvanceBookingFilter(status=[5]))) == ["Sita"]
        assert _names(apply_filters(booking_records, AdvanceBookingFilter(status=["3", 6]))) == [
            "Ravi",
            "Kiran",
            "Lata",
        ]

    def test_status_one_selected_still_excluded(self, booking_records):
        """Test ticking status 1 cannot bypass the base invariant."""
        from domains.advance_booking import AdvanceBookingFilter, apply_filters

        assert apply_filters(booking_records, AdvanceBookingFilter(status=[1])) == []

    def test_search_name_phone_room(self, booking_records):
        """Test search covers name, phone and room under either field name."""
        from domains.advance_booking import apply_filters

        assert _names(apply_filters(booking_records, search_text="sita")) == ["Sita"]
        assert _names(apply_filters(booking_records, search_text="500003")) == ["Kiran"]
        assert _names(apply_filters(booking_records, search_text="102")) == ["Sita"]

    def test_booking_date_range(self, booking_records):
        """Test the booking date range is inclusive."""
        from domains.advance_booking import AdvanceBookingFilter, apply_filters
        from filtering.filter_value import DateRange

        june = AdvanceBookingFilter(booking_date=DateRange(date(2025, 6, 10), date(2025, 6, 20)))

        assert _names(apply_filters(booking_records, june)) == ["Ravi", "Kiran"]

    def test_joining_date_falls_back_to_joined_on(self, booking_records):
        """Test joinedOn is used when joiningDate is absent."""
        from domains.advance_booking import AdvanceBookingFilter, apply_filters
        from filtering.filter_value import DateRange

        may = AdvanceBookingFilter(joining_date=DateRange(date(2025, 5, 1), date(2025, 5, 31)))

        assert _names(apply_filters(booking_records, may)) == ["Sita"]

    def test_missing_joining_date_excluded_when_active(self, booking_records):
        """Test a booking with no joining date drops out of a joining range."""
        from domains.advance_booking import AdvanceBookingFilter, apply_filters
        from filtering.filter_value import DateRange

        any_time = AdvanceBookingFilter(joining_date=DateRange(from_date=date(2000, 1, 1)))

        assert "Lata" not in _names(apply_filters(booking_records, any_time))

    def test_facets_and_search_combine(self, booking_records):
        """Test status, date and search all narrow together."""
        from domains.advance_booking import AdvanceBookingFilter, apply_filters
        from filtering.filter_value import DateRange

        value = AdvanceBookingFilter(
            status=[3],
            booking_date=DateRange(from_date=date(2025, 6, 1)),
        )

        assert _names(apply_filters(booking_records, value)) == ["Ravi", "Lata"]
        assert _names(apply_filters(booking_records, value, "301")) == ["Lata"]


class TestSortAdvanceBookings:
    """Tests for sort_advance_bookings."""

    def test_active_first_then_newest(self, booking_records):
        """Test active bookings lead, newest booking date first."""
        from domains.advance_booking import apply_filters, sort_advance_bookings

        ordered = sort_advance_bookings(apply_filters(booking_records))

        assert _names(ordered) == ["Lata", "Ravi", "Kiran", "Sita"]

    def test_undated_sorts_last_within_group(self):
        """Test bookings without a date go to the end of their group."""
        from domains.advance_booking import sort_advance_bookings

        records = [
            {"name": "NoDate", "status": 3},
            {"name": "Dated", "status": 3, "bookingDate": "2025-01-01"},
        ]

        assert [r["name"] for r in sort_advance_bookings(records)] == ["Dated", "NoDate"]

    def test_sorting_does_not_touch_input(self, booking_records):
        """Test the input list keeps its order."""
        from domains.advance_booking import sort_advance_bookings

        before = list(booking_records)
        sort_advance_bookings(booking_records)

        assert booking_records == before
