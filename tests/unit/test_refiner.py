"""Unit tests for venue name refinement."""

from showscout.extraction.refiner import refine_name


class TestRefineName:
    def test_prefers_fuller_adjacent_line(self) -> None:
        lines = ["PVR Cinemas", "PVR Cinemas: Nexus Mall, Kukatpally", "10:00 AM"]
        assert refine_name(lines, 0, "PVR Cinemas") == "PVR Cinemas: Nexus Mall, Kukatpally"

    def test_looks_behind_the_candidate(self) -> None:
        lines = ["INOX: GVK One, Banjara Hills", "INOX", "10:00 AM"]
        assert refine_name(lines, 1, "INOX") == "INOX: GVK One, Banjara Hills"

    def test_first_qualifying_line_wins(self) -> None:
        lines = ["AMB Cinemas: Gachibowli", "AMB Cinemas", "AMB Cinemas, Gachibowli Hyderabad"]
        assert refine_name(lines, 1, "AMB Cinemas") == "AMB Cinemas: Gachibowli"

    def test_returns_raw_name_without_better_line(self) -> None:
        lines = ["INOX GVK One", "10:00 AM"]
        assert refine_name(lines, 0, "INOX GVK One") == "INOX GVK One"

    def test_requires_separator(self) -> None:
        lines = ["PVR Cinemas", "PVR Cinemas Nexus Mall Kukatpally"]
        assert refine_name(lines, 0, "PVR Cinemas") == "PVR Cinemas"

    def test_clock_colon_is_not_a_separator(self) -> None:
        lines = ["ABC Multiplex - 11:15 am"]
        assert refine_name(lines, 0, "ABC Multiplex") == "ABC Multiplex"

    def test_ignores_urls(self) -> None:
        lines = ["PVR Cinemas", "https://example.com/PVR Cinemas, book"]
        assert refine_name(lines, 0, "PVR Cinemas") == "PVR Cinemas"

    def test_ignores_lines_of_one_hundred_characters_or_more(self) -> None:
        long_line = "PVR Cinemas: " + "x" * 90
        assert refine_name(["PVR Cinemas", long_line], 0, "PVR Cinemas") == "PVR Cinemas"

    def test_ignores_lines_outside_window(self) -> None:
        lines = ["PVR Cinemas", "a", "b", "PVR Cinemas: Nexus Mall"]
        assert refine_name(lines, 0, "PVR Cinemas") == "PVR Cinemas"

    def test_match_is_case_insensitive(self) -> None:
        lines = ["pvr cinemas", "PVR CINEMAS: Nexus Mall"]
        assert refine_name(lines, 0, "pvr cinemas") == "PVR CINEMAS: Nexus Mall"
