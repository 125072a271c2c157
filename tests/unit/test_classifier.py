"""Unit tests for the venue line classifier."""

from dataclasses import replace

from showscout.extraction.classifier import is_venue_line
from showscout.extraction.patterns import DEFAULT_CONFIG


class TestIsVenueLine:
    def test_accepts_keyword_with_colon(self) -> None:
        assert is_venue_line("PVR Cinemas: Nexus Mall, Kukatpally")

    def test_accepts_local_venue_with_comma(self) -> None:
        assert is_venue_line("Sandhya 70MM, RTC X Roads")

    def test_accepts_screen_format_line(self) -> None:
        assert is_venue_line("Asian Cinemas 35mm Dolby Atmos")

    def test_accepts_keyword_with_inline_time(self) -> None:
        assert is_venue_line("Talluri Theatre 10:30 AM")

    def test_accepts_keyword_with_locality(self) -> None:
        assert is_venue_line("Sree Ramana Nacharam")

    def test_rejects_keyword_without_listing_context(self) -> None:
        assert not is_venue_line("Cinepolis Mantra Mall")

    def test_rejects_line_without_venue_signal(self) -> None:
        assert not is_venue_line("Welcome to the booking page, enjoy")

    def test_rejects_digit_only_line(self) -> None:
        assert not is_venue_line("1234567")

    def test_rejects_short_line(self) -> None:
        assert not is_venue_line("PVR,")

    def test_rejects_overlong_line(self) -> None:
        assert not is_venue_line("PVR, " + "x" * 200)

    def test_accepts_line_longer_than_one_hundred(self) -> None:
        assert is_venue_line("PVR, " + "x" * 150)

    def test_rejects_url(self) -> None:
        assert not is_venue_line("https://in.bookmyshow.com/cinemas/pvr, Hyderabad")

    def test_rejects_select_prompt(self) -> None:
        assert not is_venue_line("Select PVR Cinema, Hyderabad")

    def test_exclusion_wins_over_keyword(self) -> None:
        assert not is_venue_line("Top Cinema chains in Hyderabad, Telangana")

    def test_rejects_chain_name_only(self) -> None:
        assert not is_venue_line("Miraj Cinemas")

    def test_rejects_excluded_dolby_cinema(self) -> None:
        assert not is_venue_line("Dolby Cinema, 2:30 PM")

    def test_uses_supplied_tables(self) -> None:
        config = replace(DEFAULT_CONFIG, venue_keywords=("odeon",), localities=("leicester square",))
        assert is_venue_line("Odeon Luxe, Leicester Square", config)
        assert not is_venue_line("Sandhya 70MM, RTC X Roads", config)
