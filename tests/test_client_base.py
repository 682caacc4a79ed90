"""Tests for query string building and entity id parsing."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from fakturoidpy import InvoiceQuery, InvoiceStatus
from fakturoidpy.client_base import (
    build_query_string,
    format_query_value,
    parse_entity_id,
)
from fakturoidpy.exceptions import FakturoidFormatError


class TestBuildQueryString:
    """Test conversion of parameter bags to query strings."""

    def test_skips_none_and_blank_values(self):
        """Test that None and blank values are left out."""
        params = {
            "a": None,
            "b": "",
            "c": "x",
            "d": datetime(2020, 1, 1, tzinfo=timezone.utc),
        }

        query = build_query_string(params, "?")
        assert query == "?c=x&d=2020-01-01T00%3A00%3A00Z"
        assert "a=" not in query
        assert "b=" not in query

    def test_ampersand_prefix_applied_once(self):
        """Test that the prefix is prepended exactly once."""
        query = build_query_string({"c": "x", "e": 5}, "&")
        assert query == "&c=x&e=5"

    def test_empty_result_has_no_prefix(self):
        """Test that nothing is returned when no pair is emitted."""
        assert build_query_string({"a": None, "b": "   "}, "?") == ""
        assert build_query_string({}, "&") == ""
        assert build_query_string(None, "?") == ""

    def test_none_prefix_rejected(self):
        """Test that a missing prefix is an invalid argument."""
        with pytest.raises(ValueError):
            build_query_string({"c": "x"}, None)

    def test_values_are_percent_encoded(self):
        """Test that reserved characters and spaces are escaped."""
        query = build_query_string({"number": "2024/01 & more", "t": "a-b_c.d~e"}, "?")
        assert query == "?number=2024%2F01%20%26%20more&t=a-b_c.d~e"

    def test_pydantic_model_in_field_order(self):
        """Test that a query model emits its set fields in declaration order."""
        query = InvoiceQuery(
            status=InvoiceStatus.PAID,
            subject_id=28,
            since=datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc),
        )

        assert (
            build_query_string(query, "&")
            == "&subject_id=28&since=2024-03-01T12%3A30%3A00Z&status=paid"
        )

    def test_mapping_order_is_kept(self):
        """Test that a mapping is emitted in its own order."""
        assert build_query_string({"z": 1, "a": 2, "m": 3}, "?") == "?z=1&a=2&m=3"


class TestFormatQueryValue:
    """Test formatting of single query values."""

    def test_naive_datetime_has_no_offset(self):
        """Test that an unspecified datetime is formatted without offset."""
        assert format_query_value(datetime(2020, 1, 1, 8, 0)) == "2020-01-01T08:00:00"

    def test_aware_datetime_keeps_offset(self):
        """Test that a local datetime keeps its UTC offset."""
        value = datetime(2020, 1, 1, 8, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_query_value(value) == "2020-01-01T08:00:00+02:00"

    def test_microseconds_are_kept(self):
        """Test that fractional seconds survive the round trip."""
        value = datetime(2020, 1, 1, 8, 0, 0, 123456, tzinfo=timezone.utc)
        assert format_query_value(value) == "2020-01-01T08:00:00.123456Z"

    def test_date(self):
        """Test date formatting."""
        assert format_query_value(date(2021, 12, 31)) == "2021-12-31"

    def test_invariant_numbers(self):
        """Test that numbers never use locale separators or exponents."""
        assert format_query_value(1234567) == "1234567"
        assert format_query_value(1.5) == "1.5"
        assert format_query_value(Decimal("1E+3")) == "1000"
        assert format_query_value(Decimal("12.50")) == "12.50"

    def test_bool_and_enum(self):
        """Test booleans and enums."""
        assert format_query_value(True) == "true"
        assert format_query_value(False) == "false"
        assert format_query_value(InvoiceStatus.OVERDUE) == "overdue"

    def test_none(self):
        """Test that None has no representation."""
        assert format_query_value(None) is None


class TestParseEntityId:
    """Test extraction of new entity ids from Location headers."""

    @pytest.mark.parametrize(
        "location,expected",
        [
            ("https://example.com/subjects/42.json", 42),
            ("https://example.com/subjects/42.JSON", 42),
            ("https://app.fakturoid.cz/api/v1/acme/invoices/123456", 123456),
            ("/api/v1/acme/subjects/7.json", 7),
        ],
    )
    def test_valid_locations(self, location: str, expected: int):
        """Test that the trailing numeric segment is returned."""
        assert parse_entity_id(location) == expected

    def test_non_numeric_segment(self):
        """Test that a non-numeric segment raises a descriptive error."""
        location = "https://example.com/subjects/abc"
        try:
            parse_entity_id(location)
            assert False, "Should have raised FakturoidFormatError"
        except FakturoidFormatError as e:
            assert "scheme://anystring/123456.json" in str(e)
            assert "https://example.com/subjects/abc" in str(e)

    @pytest.mark.parametrize(
        "location",
        [
            None,
            "",
            "https://example.com/subjects/",
            "https://example.com/subjects/0.json",
            "https://example.com/subjects/-5.json",
            "https://example.com/subjects/4 2.json",
        ],
    )
    def test_invalid_locations(self, location):
        """Test that malformed locations raise FakturoidFormatError."""
        with pytest.raises(FakturoidFormatError):
            parse_entity_id(location)

    def test_format_error_is_value_error(self):
        """Test that format errors can be handled as ValueError."""
        with pytest.raises(ValueError):
            parse_entity_id("nonsense")
