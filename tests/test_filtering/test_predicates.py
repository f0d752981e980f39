"""Tests for predicate primitives."""

import pytest
from datetime import date, datetime, timedelta, timezone


class TestTextMatches:
    """Tests for text_matches and any_text_matches."""

    def test_case_insensitive_substring(self):
        """Test substring matching ignores case."""
        from filtering.predicates import text_matches

        assert text_matches("Arun Kumar", "KUM")
        assert text_matches("Arun Kumar", "arun")
        assert not text_matches("Arun Kumar", "priya")

    def test_blank_needle_matches_everything(self):
        """Test empty and whitespace-only searches match all records."""
        from filtering.predicates import text_matches

        assert text_matches("anything", "")
        assert text_matches("anything", "   ")
        assert text_matches(None, None)

    def test_none_haystack_is_empty_text(self):
        """Test a missing field only matches a blank search."""
        from filtering.predicates import text_matches

        assert not text_matches(None, "a")

    def test_numbers_are_searched_as_text(self):
        """Test numeric fields such as room numbers can be searched."""
        from filtering.predicates import text_matches

        assert text_matches(101, "10")

    def test_any_text_matches_is_or_across_fields(self):
        """Test a match in any one field is enough."""
        from filtering.predicates import any_text_matches

        assert any_text_matches(["101", "GF"], "gf")
        assert not any_text_matches(["101", "GF"], "2F")
        assert any_text_matches([], "")


class TestMembership:
    """Tests for in_set and contains_all."""

    def test_empty_selection_is_unconstrained(self):
        """Test an empty selection never filters anything out."""
        from filtering.predicates import in_set

        assert in_set("Active", [])
        assert in_set(None, [])

    def test_in_set(self):
        """Test membership within a non-empty selection."""
        from filtering.predicates import in_set

        assert in_set(2, [2, 3])
        assert not in_set(1, [2, 3])

    def test_contains_all_requires_every_option(self):
        """Test multi-valued fields must carry every selected option."""
        from filtering.predicates import contains_all

        assert contains_all(["AC", "WiFi", "TV"], ["AC", "WiFi"])
        assert not contains_all(["AC"], ["AC", "WiFi"])

    def test_contains_all_empty_selection(self):
        """Test contains_all with nothing selected."""
        from filtering.predicates import contains_all

        assert contains_all(None, [])
        assert contains_all([], [])

    def test_contains_all_missing_field(self):
        """Test a record without the field fails an active selection."""
        from filtering.predicates import contains_all

        assert not contains_all(None, ["AC"])


class TestParseDate:
    """Tests for parse_date."""

    def test_iso_date(self):
        """Test plain ISO dates parse to midnight."""
        from filtering.predicates import parse_date

        assert parse_date("2025-02-01") == datetime(2025, 2, 1)

    def test_iso_datetime(self):
        """Test naive ISO timestamps keep their wall time."""
        from filtering.predicates import parse_date

        assert parse_date("2025-02-01T18:30:15") == datetime(2025, 2, 1, 18, 30, 15)

    def test_day_first_format(self):
        """Test DD/MM/YYYY strings from the expenses backend."""
        from filtering.predicates import parse_date

        assert parse_date("26/07/2025") == datetime(2025, 7, 26)

    def test_date_and_datetime_objects(self):
        """Test date objects become midnight datetimes."""
        from filtering.predicates import parse_date

        assert parse_date(date(2025, 1, 5)) == datetime(2025, 1, 5)
        assert parse_date(datetime(2025, 1, 5, 9, 0)) == datetime(2025, 1, 5, 9, 0)

    def test_aware_value_with_fixed_offset(self):
        """Test aware timestamps are converted to the given offset."""
        from filtering.predicates import parse_date

        ist = timedelta(hours=5, minutes=30)
        assert parse_date("2025-06-09T18:30:00Z", ist) == datetime(2025, 6, 10, 0, 0)
        assert parse_date("2025-06-09T18:30:00+00:00", ist) == datetime(2025, 6, 10, 0, 0)

    def test_epoch_milliseconds(self):
        """Test numeric values are epoch milliseconds."""
        from filtering.predicates import parse_date

        moment = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
        millis = int(moment.timestamp() * 1000)
        assert parse_date(millis, timedelta(0)) == datetime(2025, 3, 1, 12, 0)

    @pytest.mark.parametrize("value", [None, "", "   ", "NA", "null", "Invalid Date", "not a date", True, [], {}])
    def test_unparseable_values(self, value):
        """Test missing and malformed values parse to None."""
        from filtering.predicates import parse_date

        assert parse_date(value) is None

    def test_nan_is_none(self):
        """Test NaN numbers parse to None."""
        from filtering.predicates import parse_date

        assert parse_date(float("nan")) is None

    def test_pick_date_uses_first_parseable_field(self):
        """Test pick_date falls through missing and malformed aliases."""
        from filtering.predicates import pick_date

        record = {"joinedOn": None, "joiningDate": "garbage", "joinDate": "2025-03-01"}
        assert pick_date(record, "joinedOn", "joiningDate", "joinDate") == datetime(2025, 3, 1)
        assert pick_date({}, "joinedOn") is None
        assert pick_date(None, "joinedOn") is None


class TestDayBounds:
    """Tests for start_of_day, end_of_day and normalize_range."""

    def test_start_and_end_of_day(self):
        """Test day expansion covers the whole calendar day."""
        from filtering.predicates import end_of_day, start_of_day

        assert start_of_day(date(2025, 2, 1)) == datetime(2025, 2, 1, 0, 0, 0, 0)
        assert end_of_day(date(2025, 2, 1)) == datetime(2025, 2, 1, 23, 59, 59, 999999)

    def test_datetime_bounds_drop_time(self):
        """Test a datetime bound expands from its calendar day."""
        from filtering.predicates import end_of_day, start_of_day

        assert start_of_day(datetime(2025, 2, 1, 15, 45)) == datetime(2025, 2, 1)
        assert end_of_day(datetime(2025, 2, 1, 15, 45)).time().hour == 23

    def test_normalize_swaps_inverted_range(self):
        """Test inverted bounds are swapped."""
        from filtering.filter_value import DateRange
        from filtering.predicates import normalize_range

        inverted = DateRange(date(2025, 3, 10), date(2025, 3, 1))
        assert normalize_range(inverted) == DateRange(date(2025, 3, 1), date(2025, 3, 10))

    def test_normalize_keeps_ordered_range(self):
        """Test ordered and half-open ranges are returned unchanged."""
        from filtering.filter_value import DateRange
        from filtering.predicates import normalize_range

        ordered = DateRange(date(2025, 3, 1), date(2025, 3, 10))
        half_open = DateRange(to_date=date(2025, 3, 1))
        assert normalize_range(ordered) is ordered
        assert normalize_range(half_open) is half_open


class TestDateInRange:
    """Tests for inclusive date range matching."""

    def test_unset_range_matches_everything(self):
        """Test an empty range matches even undated records."""
        from filtering.filter_value import DateRange
        from filtering.predicates import date_in_range

        assert date_in_range(None, DateRange())
        assert date_in_range("garbage", DateRange())

    def test_single_day_includes_any_time_of_day(self):
        """Test from == to selects the whole day."""
        from filtering.filter_value import DateRange
        from filtering.predicates import date_in_range

        day = DateRange(date(2025, 2, 1), date(2025, 2, 1))
        assert date_in_range("2025-02-01T00:00:00", day)
        assert date_in_range("2025-02-01T12:00:00", day)
        assert date_in_range("2025-02-01T23:59:59.999", day)

    def test_one_millisecond_outside_is_excluded(self):
        """Test the boundaries are exact to the millisecond."""
        from filtering.filter_value import DateRange
        from filtering.predicates import date_in_range

        day = DateRange(date(2025, 2, 1), date(2025, 2, 1))
        assert not date_in_range("2025-01-31T23:59:59.999", day)
        assert not date_in_range("2025-02-02T00:00:00.001", day)
        assert not date_in_range(datetime(2025, 2, 2), day)

    def test_open_ended_bounds(self):
        """Test a missing bound is unbounded on that side."""
        from filtering.filter_value import DateRange
        from filtering.predicates import date_in_range

        since = DateRange(from_date=date(2025, 2, 1))
        until = DateRange(to_date=date(2025, 2, 1))
        assert date_in_range("2030-01-01", since)
        assert not date_in_range("2025-01-31", since)
        assert date_in_range("1999-01-01", until)
        assert not date_in_range("2025-02-02", until)

    def test_inverted_range_is_swapped(self):
        """Test an inverted range behaves like the ordered one."""
        from filtering.filter_value import DateRange
        from filtering.predicates import date_in_range

        inverted = DateRange(date(2025, 3, 10), date(2025, 3, 1))
        assert date_in_range("2025-03-05", inverted)
        assert date_in_range("2025-03-10T23:00:00", inverted)
        assert not date_in_range("2025-03-11", inverted)

    def test_inverted_calendar_example(self):
        """Test from 2025-03-10 to 2025-01-01 covers January through March 10."""
        from filtering.filter_value import DateRange
        from filtering.predicates import date_in_range

        inverted = DateRange(date(2025, 3, 10), date(2025, 1, 1))
        assert date_in_range("2025-01-01", inverted)
        assert date_in_range("2025-02-14", inverted)
        assert date_in_range("2025-03-10T23:59:59", inverted)
        assert not date_in_range("2024-12-31", inverted)
        assert not date_in_range("2025-03-11", inverted)

    def test_aware_bound_swap_uses_expanded_day(self):
        """Test an aware bound is swapped on the same day it is expanded to."""
        from filtering.filter_value import DateRange, calendar_day
        from filtering.predicates import date_in_range, start_of_day

        late_evening = datetime(2025, 3, 10, 20, tzinfo=timezone(timedelta(hours=-10)))
        mixed = DateRange(late_evening, date(2025, 3, 10))

        assert start_of_day(late_evening).date() == calendar_day(late_evening)
        assert date_in_range("2025-03-10T12:00:00", mixed)

    def test_unparseable_candidate_excluded_from_active_range(self):
        """Test undated records drop out once a range is set."""
        from filtering.filter_value import DateRange
        from filtering.predicates import date_in_range

        active = DateRange(from_date=date(2025, 1, 1))
        assert not date_in_range(None, active)
        assert not date_in_range("not a date", active)

    def test_fixed_offset_moves_record_across_midnight(self):
        """Test a UTC timestamp is compared in the given local offset."""
        from filtering.filter_value import DateRange
        from filtering.predicates import date_in_range

        ist = timedelta(hours=5, minutes=30)
        june_10 = DateRange(date(2025, 6, 10), date(2025, 6, 10))
        assert date_in_range("2025-06-09T18:30:00Z", june_10, ist)
        assert not date_in_range("2025-06-09T18:29:59Z", june_10, ist)
