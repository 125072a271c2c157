"""Movies monitored when no URL is given."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MonitoredMovie:
    """A movie page to watch, with the flavour used in its announcements."""

    name: str
    url: str
    emoji: str
    release_date: str
    headline: str | None = None  # Celebration header, "{count}" is replaced
    call_to_action: str | None = None

    @property
    def slug(self) -> str:
        return "-".join(self.name.lower().split())


CATALOG: tuple[MonitoredMovie, ...] = (
    MonitoredMovie(
        name="Coolie",
        url="https://in.bookmyshow.com/movies/hyderabad/coolie/buytickets/ET00395817/20250814",
        emoji="🚂",
        release_date="August 14, 2025",
        headline=(
            "🚂 *COOLIE BOOKING NOW LIVE!* 💪🎉\n\n"
            "🔥 ALL ABOARD! The Coolie train has arrived!\n"
            "🎬 Action packed journey begins in {count} theatres!\n\n"
            "🚂 *COOLIE THEATRES (Train stations):*\n\n"
        ),
        call_to_action="🚂 All aboard the Coolie express!\n💪 Don't miss this action ride!",
    ),
    MonitoredMovie(
        name="War 2",
        url="https://in.bookmyshow.com/movies/hyderabad/war-2/buytickets/ET00356501/20250814",
        emoji="💥",
        release_date="August 14, 2025",
        headline=(
            "💥 *WAR 2 BOOKING NOW LIVE!* 🔥🎉\n\n"
            "⚔️ THE BATTLE BEGINS! War has been declared!\n"
            "🎬 Epic warfare starts in {count} theatres!\n\n"
            "💥 *WAR 2 THEATRES (Battlefields):*\n\n"
        ),
        call_to_action="💥 War 2 has launched after the epic wait!\n🔥 Time to join the battle!",
    ),
)


def identify_movie(url: str, catalog: tuple[MonitoredMovie, ...] = CATALOG) -> MonitoredMovie | None:
    """Find the catalog entry whose slug appears in the URL."""
    for movie in catalog:
        if movie.slug in movie.url and movie.slug in url:
            return movie
    return None
