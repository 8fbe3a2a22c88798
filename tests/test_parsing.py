"""Tests for input parsing and two-digit year normalization."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from utc_time.errors import InvalidTimeError, ParseError, UnrecognizedFormatError
from utc_time.parsing import (
    DATETIME_LAYOUTS,
    UNRECOGNIZED_FORMAT_MESSAGE,
    map_two_digit_year,
    match_layout,
    parse_input,
)


class TestMapTwoDigitYear:
    """Tests for map_two_digit_year."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("year", "expected"),
        [(0, 2000), (1, 2001), (25, 2025), (68, 2068), (69, 1969), (90, 1990), (99, 1999)],
    )
    def test_maps_into_1969_2068(self, year: int, expected: int) -> None:
        assert map_two_digit_year(year) == expected

    @pytest.mark.unit
    def test_total_on_zero_to_ninety_nine(self) -> None:
        mapped = [map_two_digit_year(y) for y in range(100)]
        assert mapped[:69] == list(range(2000, 2069))
        assert mapped[69:] == list(range(1969, 2000))

    @pytest.mark.unit
    @pytest.mark.parametrize("year", [-1, 100, 999, 1970, 2025])
    def test_other_years_pass_through(self, year: int) -> None:
        assert map_two_digit_year(year) == year


class TestLayouts:
    """Tests for the accepted date+time layouts."""

    @pytest.mark.unit
    def test_closed_set_of_four_layouts(self) -> None:
        shapes = [(layout.separator, layout.year_width) for layout in DATETIME_LAYOUTS]
        assert shapes == [("-", 4), ("-", 2), ("/", 4), ("/", 2)]

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("raw", "pattern"),
        [
            ("21:00 22-09-2025", "HH:MM dd-mm-yyyy"),
            ("21:00 22-09-25", "HH:MM dd-mm-yy"),
            ("21:00 22/09/2025", "HH:MM dd/mm/yyyy"),
            ("21:00 22/09/25", "HH:MM dd/mm/yy"),
        ],
    )
    def test_exactly_one_layout_matches(self, raw: str, pattern: str) -> None:
        matching = [layout for layout in DATETIME_LAYOUTS if layout.regex.fullmatch(raw)]
        assert [layout.pattern for layout in matching] == [pattern]

        found = match_layout(raw)
        assert found is not None
        assert found[0].pattern == pattern

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw",
        ["21:00 22-09/2025", "21:00 22.09.2025", "21:00 22-09-202", "21:00 2025-09-22"],
    )
    def test_mixed_or_foreign_shapes_do_not_match(self, raw: str) -> None:
        assert match_layout(raw) is None


class TestParseTimeAndDate:
    """Tests for the HH:MM <date> path of parse_input."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw",
        ["21:00 22-09-2025", "21:00 22-09-25", "21:00 22/09/2025", "21:00 22/09/25"],
    )
    def test_all_layouts_give_same_value(self, raw: str) -> None:
        assert parse_input(raw) == datetime(2025, 9, 22, 21, 0)

    @pytest.mark.unit
    def test_result_is_naive(self) -> None:
        assert parse_input("21:00 22-09-2025").tzinfo is None

    @pytest.mark.unit
    def test_two_digit_year_in_last_century(self) -> None:
        assert parse_input("07:15 01/01/85") == datetime(1985, 1, 1, 7, 15)

    @pytest.mark.unit
    def test_year_zero_maps_to_2000(self) -> None:
        assert parse_input("00:00 29-02-00") == datetime(2000, 2, 29, 0, 0)

    @pytest.mark.unit
    def test_four_digit_year_below_100_is_mapped(self) -> None:
        assert parse_input("12:00 01-06-0025") == datetime(2025, 6, 1, 12, 0)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw",
        [
            "10:00 31-09-25",  # September has 30 days
            "10:00 31/04/2025",
            "10:00 29-02-23",  # not a leap year
            "10:00 00-01-2025",
            "10:00 15-13-2025",
            "24:00 22-09-2025",
            "12:60 22-09-2025",
        ],
    )
    def test_invalid_fields_never_clamp(self, raw: str) -> None:
        with pytest.raises(UnrecognizedFormatError):
            parse_input(raw)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw",
        [
            "not-a-time",
            "",
            "9:00 22-09-2025",
            "21:00  22-09-2025",
            "21:00 22-09-2025 ",
            "21:00 22-09-2025\n",  # trailing newline
            "21:00 ٢٢-09-2025",  # Arabic-Indic day digits
            "21:00 22/09/２５",  # fullwidth year digits
        ],
    )
    def test_unrecognized_shapes(self, raw: str) -> None:
        with pytest.raises(UnrecognizedFormatError) as exc_info:
            parse_input(raw)
        assert str(exc_info.value) == UNRECOGNIZED_FORMAT_MESSAGE

    @pytest.mark.unit
    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            parse_input("not-a-time")


class TestParseTimeOnly:
    """Tests for the bare HH:MM path of parse_input."""

    @pytest.mark.unit
    def test_uses_brisbane_date_not_utc_date(self, frozen_now: datetime) -> None:
        # 20:30 UTC on the 22nd is 06:30 on the 23rd in Brisbane.
        assert frozen_now.date() == date(2025, 9, 22)
        assert parse_input("14:30") == datetime(2025, 9, 23, 14, 30)

    @pytest.mark.unit
    def test_same_calendar_day_before_utc_14(
        self, freeze_utc_now: Callable[[datetime], None]
    ) -> None:
        freeze_utc_now(datetime(2025, 9, 22, 13, 59, tzinfo=UTC))
        assert parse_input("08:00") == datetime(2025, 9, 22, 8, 0)

    @pytest.mark.unit
    def test_independent_of_the_zone_now_is_expressed_in(
        self, freeze_utc_now: Callable[[datetime], None]
    ) -> None:
        # The same instant expressed with a far-west offset.
        freeze_utc_now(datetime(2025, 9, 22, 10, 30, tzinfo=timezone(timedelta(hours=-10))))
        assert parse_input("00:00") == datetime(2025, 9, 23, 0, 0)

    @pytest.mark.unit
    def test_every_valid_time_parses(self, frozen_now: datetime) -> None:
        for hour in range(24):
            for minute in range(60):
                parsed = parse_input(f"{hour:02d}:{minute:02d}")
                assert parsed == datetime(2025, 9, 23, hour, minute)

    @pytest.mark.unit
    @pytest.mark.parametrize("raw", ["24:00", "23:60", "99:99"])
    def test_out_of_range_bare_time(self, raw: str, frozen_now: datetime) -> None:
        with pytest.raises(InvalidTimeError):
            parse_input(raw)

    @pytest.mark.unit
    def test_invalid_time_is_a_parse_error(self, frozen_now: datetime) -> None:
        with pytest.raises(ParseError):
            parse_input("25:00")

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "raw",
        [
            "14:30\n",  # trailing newline
            "\n14:30",
            "١٤:٣٠",  # Arabic-Indic digits
            "１４:３０",  # fullwidth digits
        ],
    )
    def test_only_plain_ascii_bare_times(self, raw: str, frozen_now: datetime) -> None:
        with pytest.raises(UnrecognizedFormatError):
            parse_input(raw)
