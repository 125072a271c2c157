"""Unit tests for showtime extraction."""

import re
from dataclasses import replace

from showscout.extraction.patterns import DEFAULT_CONFIG
from showscout.extraction.times import (
    extract_times,
    find_time_tokens,
    mask_time_tokens,
    sorted_showtimes,
    time_sort_key,
)

FILLER = "Lorem ipsum"


class TestFindTimeTokens:
    def test_finds_tokens_in_order(self) -> None:
        assert find_time_tokens("10:00 AM, 2:30 PM, 6:00 PM") == ["10:00 AM", "2:30 PM", "6:00 PM"]

    def test_accepts_lowercase_and_no_space(self) -> None:
        assert find_time_tokens("11:15am and 4:45 pm") == ["11:15am", "4:45 pm"]

    def test_ignores_times_without_meridiem(self) -> None:
        assert find_time_tokens("Starts 18:30") == []

    def test_grouped_pattern_returns_whole_token(self) -> None:
        config = replace(DEFAULT_CONFIG, time_pattern=re.compile(r"\d{1,2}:\d{2}\s*(am|pm|AM|PM)", re.I))
        assert find_time_tokens("PVR Cinema: 10:00 AM, 2:30 PM", config) == ["10:00 AM", "2:30 PM"]


class TestExtractTimes:
    def test_collects_times_after_venue(self) -> None:
        lines = ["PVR: Nexus Mall", "10:00 AM", "1:30 PM", "Some text"]
        assert extract_times(lines, 0) == {"10:00 AM", "1:30 PM"}

    def test_includes_inline_times(self) -> None:
        lines = ["PVR Nexus: 10:00 AM, 6:00 PM"]
        assert extract_times(lines, 0) == {"10:00 AM", "6:00 PM"}

    def test_duplicate_tokens_collapse(self) -> None:
        lines = ["PVR Nexus: 10:00 AM", "10:00 AM", "10:00 AM"]
        assert extract_times(lines, 0) == {"10:00 AM"}

    def test_preserves_token_text_as_matched(self) -> None:
        lines = ["PVR Nexus", "10:00 am", "10:00 AM"]
        assert extract_times(lines, 0) == {"10:00 am", "10:00 AM"}

    def test_looks_five_lines_back(self) -> None:
        lines = ["9:00 AM"] + [FILLER] * 5 + ["Venue", "11:00 AM"]
        assert extract_times(lines, 6) == {"11:00 AM"}
        assert extract_times(lines, 5) == {"9:00 AM", "11:00 AM"}

    def test_forward_range_is_exclusive(self) -> None:
        lines = ["Venue"] + [FILLER] * 14 + ["4:00 PM"]
        assert extract_times(lines, 0) == set()
        assert extract_times(lines, 0, forward_range=16) == {"4:00 PM"}

    def test_secondary_scan_reaches_past_short_window(self) -> None:
        lines = ["Venue", FILLER, "2:00 PM"]
        assert extract_times(lines, 0, forward_range=1) == {"2:00 PM"}

    def test_secondary_scan_skips_long_lines(self) -> None:
        lines = ["Venue", "x" * 60 + " 3:00 PM"]
        assert extract_times(lines, 0, forward_range=1) == set()

    def test_secondary_scan_skips_select_lines(self) -> None:
        lines = ["Venue", "Select 3:00 PM"]
        assert extract_times(lines, 0, forward_range=1) == set()

    def test_returns_empty_set_when_no_times(self) -> None:
        assert extract_times(["Venue", FILLER], 0) == set()

    def test_clips_window_at_end_of_text(self) -> None:
        assert extract_times(["Venue: 7:00 PM"], 0, forward_range=50) == {"7:00 PM"}


class TestMaskTimeTokens:
    def test_removes_clock_colons(self) -> None:
        assert ":" not in mask_time_tokens("ABC Multiplex - 11:15 am")

    def test_keeps_separator_colons(self) -> None:
        assert ":" in mask_time_tokens("ABC Multiplex Hyderabad: 11:15 am")


class TestSortedShowtimes:
    def test_sort_key_handles_noon_and_midnight(self) -> None:
        assert time_sort_key("12:15 PM") == (12, 15)
        assert time_sort_key("12:05 am") == (0, 5)
        assert time_sort_key("2:30 pm") == (14, 30)

    def test_orders_by_clock_time(self) -> None:
        showtimes = {"6:00 PM", "10:00 AM", "12:15 PM", "12:05 AM"}
        assert sorted_showtimes(showtimes) == ["12:05 AM", "10:00 AM", "12:15 PM", "6:00 PM"]
