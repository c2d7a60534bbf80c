"""CalendarVersion: text form, parsing, ordering and increment rules."""
from datetime import date, datetime, timezone

import pytest

from gitcalver.core.calendar_version import (
    CalendarVersion,
    ParseError,
    variant_of_tag,
)

MAY_2024 = datetime(2024, 5, 17, 12, 0, tzinfo=timezone.utc)


def test_generate_uses_year_and_month():
    v = CalendarVersion.generate(MAY_2024)
    assert v == CalendarVersion(2024, 5, 1)
    assert CalendarVersion.generate(date(2023, 12, 31), revision=7) == CalendarVersion(2023, 12, 7)


def test_generate_rejects_revision_below_one():
    with pytest.raises(ValueError):
        CalendarVersion.generate(MAY_2024, revision=0)


def test_text_form_pads_month_only():
    assert str(CalendarVersion(2024, 5, 3)) == "2024.05.3"
    assert str(CalendarVersion(2024, 11, 12)) == "2024.11.12"


@pytest.mark.parametrize("version", [
    CalendarVersion(2024, 1, 1),
    CalendarVersion(2024, 12, 99),
    CalendarVersion(1999, 9, 10),
])
def test_text_form_parses_back(version):
    assert CalendarVersion.parse(str(version)).unwrap() == version


def test_parse_ignores_trailing_variant():
    result = CalendarVersion.parse("2024.05.4-free")
    assert result.ok
    assert result.version == CalendarVersion(2024, 5, 4)


@pytest.mark.parametrize("text", [
    "", "v2024.05.1", "2024.5.1", "2024.13.1", "2024.00.1", "2024.05.0",
    "release-1", "24.05.1", None, 20240501,
])
def test_parse_failure_is_returned_not_raised(text):
    result = CalendarVersion.parse(text)
    assert not result.ok
    assert result.get_or_none() is None
    assert isinstance(result.error, ParseError)
    with pytest.raises(ParseError):
        result.unwrap()


def test_ordering_is_year_month_revision():
    assert CalendarVersion(2024, 5, 10) > CalendarVersion(2024, 5, 9)
    assert CalendarVersion(2024, 6, 1) > CalendarVersion(2024, 5, 30)
    assert CalendarVersion(2025, 1, 1) > CalendarVersion(2024, 12, 40)


def test_increment_same_month_bumps_revision():
    v = CalendarVersion(2024, 5, 3)
    assert v.increment(MAY_2024) == CalendarVersion(2024, 5, 4)


def test_increment_later_month_resets_revision():
    v = CalendarVersion(2024, 4, 2)
    assert v.increment(MAY_2024) == CalendarVersion(2024, 5, 1)
    assert CalendarVersion(2023, 12, 8).increment(datetime(2024, 1, 2)) == CalendarVersion(2024, 1, 1)


def test_increment_with_clock_behind_still_moves_forward():
    v = CalendarVersion(2024, 7, 2)
    assert v.increment(MAY_2024) == CalendarVersion(2024, 7, 3)


@pytest.mark.parametrize("when", [
    datetime(2023, 1, 1), datetime(2024, 5, 1), datetime(2024, 6, 1), datetime(2030, 2, 1),
])
def test_increment_is_always_greater(when):
    v = CalendarVersion(2024, 5, 6)
    assert v.increment(when) > v


def test_tag_suffix():
    v = CalendarVersion(2024, 5, 4)
    assert v.tag() == "2024.05.4"
    assert v.tag("") == "2024.05.4"
    assert v.tag("  ") == "2024.05.4"
    assert v.tag("free") == "2024.05.4-free"


def test_variant_of_tag_splits_on_first_separator():
    assert variant_of_tag("2024.05.4") == ""
    assert variant_of_tag("2024.05.4-pro") == "pro"
    assert variant_of_tag("2024.05.4-pro-eu") == "pro-eu"
