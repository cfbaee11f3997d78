"""Unit tests for value parsers."""

import pytest

from landcover_pipeline.transform.parsers import (
    image_name,
    parse_number,
    parse_percentage,
    resolve_cover_range,
    strip_format_query,
)


class TestParsePercentage:
    """Tests for parse_percentage."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("25_50", 50), ("0_10", 10), ("50_75", 75), ("75_100", 100), ("2.5_7.5", 7.5)],
    )
    def test_range_returns_upper_bound(self, value: str, expected: float) -> None:
        """Ranges report their maximum, not midpoint or minimum."""
        assert parse_percentage(value) == expected

    def test_bare_number(self) -> None:
        """Bare numeric strings and numbers pass through."""
        assert parse_percentage("40") == 40
        assert parse_percentage("12.5") == 12.5
        assert parse_percentage(30) == 30

    def test_integral_values_are_ints(self) -> None:
        """Integral results are ints so sums render without a trailing .0."""
        assert isinstance(parse_percentage("25_50"), int)
        assert isinstance(parse_percentage("40"), int)

    @pytest.mark.parametrize("value", [None, "", "abc", "x_y", False])
    def test_absent_or_unparsable_is_zero(self, value: object) -> None:
        """Absent or unparsable input yields 0."""
        assert parse_percentage(value) == 0

    @pytest.mark.parametrize(("value", "expected"), [("25_", 0), ("_50", 50), ("_", 0)])
    def test_empty_range_side_reads_as_zero(self, value: str, expected: int) -> None:
        """A missing bound still makes a range; the upper bound is reported."""
        assert parse_percentage(value) == expected

    def test_empty_upper_bound_falls_back_to_minimum(self) -> None:
        assert resolve_cover_range("10_25", "25_") == 25

    def test_malformed_range_falls_back_to_leading_number(self) -> None:
        """More than one underscore is not a range; the leading number is read."""
        assert parse_percentage("10_20_30") == 10


class TestParseNumber:
    """Tests for parse_number."""

    def test_leading_number(self) -> None:
        """Reads the leading numeric part of a string."""
        assert parse_number("45%") == 45
        assert parse_number("25_50") == 25

    def test_non_numeric(self) -> None:
        assert parse_number(None) == 0
        assert parse_number("n/a") == 0
        assert parse_number(True) == 0


class TestResolveCoverRange:
    """Tests for the max-then-min cover resolution."""

    def test_prefers_maximum(self) -> None:
        assert resolve_cover_range("10_25", "50_75") == 75

    def test_falls_back_to_minimum(self) -> None:
        assert resolve_cover_range("10_25", None) == 25

    def test_neither_is_zero(self) -> None:
        assert resolve_cover_range(None, "") == 0


class TestImageName:
    """Tests for image_name."""

    def test_strips_namespace_and_lowercases_direction(self) -> None:
        assert image_name("uuid:abc-123", "North", "IMG_1.png") == "abc-123-north.jpg"

    def test_forces_jpg_extension(self) -> None:
        assert image_name("abc", "west", "photo.webp") == "abc-west.jpg"

    @pytest.mark.parametrize("original", [None, "", False])
    def test_no_original_filename(self, original: object) -> None:
        """No captured photo means no filename, whatever the identifier."""
        assert image_name("uuid:abc", "East", original) == ""


class TestStripFormatQuery:
    """Tests for strip_format_query."""

    def test_strips_suffix(self) -> None:
        url = "https://kc.example.org/attachments/11/?format=json"
        assert strip_format_query(url) == "https://kc.example.org/attachments/11/"

    def test_case_insensitive(self) -> None:
        assert strip_format_query("https://x/a/?Format=JSON") == "https://x/a/"

    def test_leaves_other_urls(self) -> None:
        assert strip_format_query("https://x/a/?format=json&x=1") == "https://x/a/?format=json&x=1"

    def test_empty(self) -> None:
        assert strip_format_query(None) == ""
        assert strip_format_query("") == ""
