"""Tests for parser module."""

import math

import pytest

from mb_ms.parser import is_invalid, match_group, parse, scan, to_number
from mb_ms.units import UNITS_BY_CLASS, UnitClass


class TestParse:
    """Tests for parse function."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1d", 86_400_000),
            ("1.5h", 5_400_000),
            ("-100", -100),
            ("100", 100),
            ("2 days", 172_800_000),
            ("1y", 31_557_600_000),
            ("1 year", 31_557_600_000),
            ("2yrs", 63_115_200_000),
            ("1w", 604_800_000),
            ("2 weeks", 1_209_600_000),
            ("1 hour", 3_600_000),
            ("2 hrs", 7_200_000),
            ("1hr", 3_600_000),
            ("1m", 60_000),
            ("5 min", 300_000),
            ("5 mins", 300_000),
            ("1 minute", 60_000),
            ("1s", 1000),
            ("2 secs", 2000),
            ("1 second", 1000),
            ("100ms", 100),
            ("100 msecs", 100),
            ("1 millisecond", 1),
            ("2 milliseconds", 2),
            (".5s", 500),
            ("-.5s", -500),
            ("-1.5h", -5_400_000),
            ("-3 days", -259_200_000),
        ],
    )
    def test_single_unit(self, raw: str, expected: float):
        """Single unit groups are converted to milliseconds."""
        assert parse(raw) == expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1d 2h", 93_600_000),
            ("1d2h", 93_600_000),
            ("1h 30m", 5_400_000),
            ("1h 30m 15s", 5_415_000),
            ("1y 1w 1d 1h 1m 1s 1ms", 31_557_600_000 + 604_800_000 + 86_400_000 + 3_600_000 + 60_000 + 1000 + 1),
            ("1m 500", 60_500),
            ("10 hours 5", 36_000_005),
            ("1h -30m", 1_800_000),
        ],
    )
    def test_multiple_units(self, raw: str, expected: float):
        """Groups in precedence order are summed."""
        assert parse(raw) == expected

    @pytest.mark.parametrize("raw", ["10h", "10H", "10 HOURS", "10 Hrs", "10 hOuR"])
    def test_case_insensitive(self, raw: str):
        """Unit tokens match in any letter case."""
        assert parse(raw) == 36_000_000

    @pytest.mark.parametrize("raw", ["", "foobar", "   ", "+5s", "abc 5s", "5 x", "٣h", "５s", "٣"])
    def test_no_duration(self, raw: str):
        """Strings without a unit group are NaN."""
        assert math.isnan(parse(raw))

    @pytest.mark.parametrize("raw", ["h", "-d", "ms", "1d s", "1h m"])
    def test_unit_without_number(self, raw: str):
        """A unit token with no digits before it makes the whole result NaN."""
        assert math.isnan(parse(raw))

    def test_trailing_text_ignored(self):
        """Input left over after the last group does not affect the result."""
        assert parse("1d foo") == 86_400_000
        assert parse("1h1d") == 3_600_000

    def test_leading_whitespace(self):
        """Whitespace before the first group is skipped."""
        assert parse("  1y") == 31_557_600_000

    def test_out_of_order_units_stop_scanning(self):
        """Groups must come in precedence order; a later larger unit is left over."""
        assert parse("30m 1h") == 1_800_000

    def test_bare_number_at_line_end(self):
        """A bare number followed by a newline counts as milliseconds."""
        assert parse("5\nfoo") == 5

    def test_result_is_float(self):
        """Parsed values are floats."""
        assert isinstance(parse("1s"), float)


class TestMinutesMilliseconds:
    """Tests for the minutes/milliseconds disambiguation."""

    def test_ms_is_not_minutes(self):
        """'ms' is milliseconds, not minutes followed by seconds."""
        assert parse("1ms") == 1
        assert parse("1MS") == 1

    def test_bare_m_is_minutes(self):
        """A bare 'm' not followed by 's' or 'i' is minutes."""
        assert parse("2m") == 120_000
        assert parse("2m 5s") == 125_000

    def test_minutes_group_rejects_ms(self):
        """The minutes group alone does not match '1ms'."""
        assert match_group(UNITS_BY_CLASS[UnitClass.MINUTES], "1ms") is None

    def test_minutes_group_rejects_dangling_mi(self):
        """'mi' that is not a full minutes spelling is not minutes."""
        assert match_group(UNITS_BY_CLASS[UnitClass.MINUTES], "1mi") is None
        assert math.isnan(parse("1mi"))


class TestMatchGroup:
    """Tests for match_group function."""

    def test_match(self):
        """A group reports its number text and end position."""
        group = match_group(UNITS_BY_CLASS[UnitClass.HOURS], "1.5 hours later")
        assert group is not None
        assert group.number == "1.5"
        assert group.end == len("1.5 hours")
        assert group.ms == 5_400_000

    def test_longest_spelling_wins(self):
        """The longest matching spelling is consumed."""
        group = match_group(UNITS_BY_CLASS[UnitClass.DAYS], "2days")
        assert group is not None
        assert group.end == len("2days")

    def test_absent(self):
        """A group of another class is absent."""
        assert match_group(UNITS_BY_CLASS[UnitClass.DAYS], "2h") is None

    def test_position(self):
        """Matching starts at the given position."""
        group = match_group(UNITS_BY_CLASS[UnitClass.SECONDS], "1m 5s", pos=2)
        assert group is not None
        assert group.value == 5

    def test_elided_milliseconds(self):
        """Only the milliseconds group accepts a bare number at end of input."""
        assert match_group(UNITS_BY_CLASS[UnitClass.MILLISECONDS], "42") is not None
        assert match_group(UNITS_BY_CLASS[UnitClass.SECONDS], "42") is None

    def test_elision_needs_digits(self):
        """An empty number at end of input is not an elided milliseconds group."""
        assert match_group(UNITS_BY_CLASS[UnitClass.MILLISECONDS], "") is None
        assert match_group(UNITS_BY_CLASS[UnitClass.MILLISECONDS], "-") is None


class TestScan:
    """Tests for scan function."""

    def test_classes_in_order(self):
        """Found groups are reported in precedence order."""
        groups = scan("1w 2d 3s")
        assert [g.unit.cls for g in groups] == [UnitClass.WEEKS, UnitClass.DAYS, UnitClass.SECONDS]

    def test_empty(self):
        """No groups in a string without durations."""
        assert scan("hello") == []


class TestToNumber:
    """Tests for to_number function."""

    @pytest.mark.parametrize(("text", "expected"), [("1", 1.0), ("-1.5", -1.5), (".25", 0.25), ("007", 7.0)])
    def test_valid(self, text: str, expected: float):
        """Number tokens with digits are converted."""
        assert to_number(text) == expected

    @pytest.mark.parametrize("text", ["", "-", "٣", "５"])
    def test_no_digits(self, text: str):
        """Number tokens without digits are NaN."""
        assert math.isnan(to_number(text))


class TestIsInvalid:
    """Tests for is_invalid function."""

    def test_nan(self):
        """NaN parse results are invalid."""
        assert is_invalid(parse("foobar"))

    def test_number(self):
        """Numeric parse results, zero included, are valid."""
        assert not is_invalid(parse("0s"))
        assert not is_invalid(parse("1d"))
