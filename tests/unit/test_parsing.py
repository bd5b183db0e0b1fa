"""Unit tests for numeric text parsing."""

import pytest

from process_service.core.parsing import (
    FieldParseError,
    is_blank,
    parse_latitude,
    parse_longitude,
    parse_optional_number,
    parse_positive_int,
)


@pytest.mark.unit
class TestParsing:

    def test_blank(self):
        assert is_blank("")
        assert is_blank("   ")
        assert is_blank(None)
        assert not is_blank("0")

    def test_optional_number_blank_is_none(self):
        assert parse_optional_number("", "Volume") is None
        assert parse_optional_number(" 2.5 ", "Volume") == 2.5

    @pytest.mark.parametrize("raw", ["abc", "nan", "inf", "1,5", "1_5", "\u0661\u0665", "1e999", "0x10"])
    def test_optional_number_rejects_garbage(self, raw):
        with pytest.raises(FieldParseError) as exc_info:
            parse_optional_number(raw, "Volume")
        assert exc_info.value.message == "Volume must be a valid number"

    @pytest.mark.parametrize("raw,expected", [("15", 15), ("15.0", 15), (" 3 ", 3)])
    def test_positive_int(self, raw, expected):
        assert parse_positive_int(raw, "Unit count") == expected

    @pytest.mark.parametrize("raw", ["0", "-2", "1.5"])
    def test_positive_int_rejects(self, raw):
        with pytest.raises(FieldParseError, match="positive whole number"):
            parse_positive_int(raw, "Unit count")

    def test_positive_int_rejects_digit_separator(self):
        with pytest.raises(FieldParseError) as exc_info:
            parse_positive_int("1_000", "Unit count")
        assert exc_info.value.message == "Unit count must be a valid number"

    @pytest.mark.parametrize("raw,expected", [("+2", 2.0), (".5", 0.5), ("3.", 3.0), ("1e3", 1000.0)])
    def test_optional_number_plain_decimals(self, raw, expected):
        assert parse_optional_number(raw, "Volume") == expected

    def test_latitude_bounds(self):
        assert parse_latitude("-90") == -90
        assert parse_latitude("6.2442") == 6.2442
        with pytest.raises(FieldParseError) as exc_info:
            parse_latitude("90.5")
        assert exc_info.value.message == "Latitude must be a valid number between -90 and 90"

    def test_longitude_bounds(self):
        assert parse_longitude("-180") == -180
        with pytest.raises(FieldParseError, match="between -180 and 180"):
            parse_longitude("west")
