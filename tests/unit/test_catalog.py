"""Unit tests for the monitored movie catalog."""

from showscout.catalog import CATALOG, MonitoredMovie, identify_movie


class TestCatalog:
    def test_slug(self) -> None:
        movie = MonitoredMovie(name="War 2", url="", emoji="💥", release_date="")
        assert movie.slug == "war-2"

    def test_headlines_take_venue_count(self) -> None:
        for movie in CATALOG:
            assert movie.headline is not None
            assert "{count}" in movie.headline
            assert "12" in movie.headline.format(count=12)


class TestIdentifyMovie:
    def test_matches_slug_in_url(self) -> None:
        movie = identify_movie("https://in.bookmyshow.com/movies/hyderabad/war-2/buytickets/ET00356501/20250815")
        assert movie is not None
        assert movie.name == "War 2"

    def test_unknown_url(self) -> None:
        assert identify_movie("https://in.bookmyshow.com/movies/hyderabad/kingdom/buytickets/") is None

    def test_custom_catalog(self) -> None:
        kingdom = MonitoredMovie(
            name="Kingdom",
            url="https://in.bookmyshow.com/movies/hyderabad/kingdom/ET00412345",
            emoji="👑",
            release_date="July 31, 2025",
        )
        assert identify_movie(kingdom.url + "?type=coming-soon", (kingdom,)) is kingdom
