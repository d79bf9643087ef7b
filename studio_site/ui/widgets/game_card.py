"""Widgets for the games section: headline totals and one card per game."""

from typing import ClassVar, override

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding, BindingType
from textual.containers import Horizontal, Vertical
from textual.widgets import Static

import structlog

from studio_site.models.game import GameRecord
from studio_site.services.catalog import DEFAULT_GAME_DESCRIPTION

log = structlog.stdlib.get_logger()


def format_count(value: int | None) -> str:
    """Format a counter with thousands separators, unknown counting as 0."""
    return f"{value or 0:,}"


def get_game_display_info(game: GameRecord) -> dict[str, str]:
    """Get the strings a game card shows."""
    return {
        "title": game.title,
        "playing": format_count(game.playing),
        "visits": format_count(game.visits),
        "description": game.description or DEFAULT_GAME_DESCRIPTION,
        "cover": game.cover,
        "url": game.url,
    }


class StatsWidget(Horizontal):
    """Total visits and active players across all games."""

    DEFAULT_CSS: ClassVar[str] = """
    StatsWidget {
        height: auto;
        margin: 1 0;
    }

    StatsWidget .stat {
        width: 1fr;
        height: auto;
        padding: 1 2;
        border: round $secondary;
        text-align: center;
    }

    StatsWidget .stat-value {
        text-style: bold;
        color: $text;
    }

    StatsWidget .stat-label {
        color: $text-muted;
    }
    """

    def __init__(
        self,
        total_visits: int = 0,
        total_playing: int = 0,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.total_visits = total_visits
        self.total_playing = total_playing

    @override
    def compose(self) -> ComposeResult:
        with Vertical(classes="stat"):
            yield Static(format_count(self.total_visits), id="stat-visits", classes="stat-value")
            yield Static("Total Visits", classes="stat-label")
        with Vertical(classes="stat"):
            yield Static(format_count(self.total_playing), id="stat-playing", classes="stat-value")
            yield Static("Active Players", classes="stat-label")

    def update_totals(self, total_visits: int, total_playing: int) -> None:
        """Update the displayed totals."""
        self.total_visits = total_visits
        self.total_playing = total_playing
        self.query_one("#stat-visits", Static).update(format_count(total_visits))
        self.query_one("#stat-playing", Static).update(format_count(total_playing))


class GameCard(Vertical):
    """A focusable card describing one game."""

    DEFAULT_CSS: ClassVar[str] = """
    GameCard {
        height: auto;
        padding: 1 2;
        margin-bottom: 1;
        border: round $primary-darken-2;
    }

    GameCard:focus {
        border: round $accent;
    }

    GameCard .game-title {
        text-style: bold;
        color: $primary;
    }

    GameCard .game-stats {
        color: $text-muted;
    }

    GameCard .game-description {
        margin: 1 0;
    }

    GameCard .game-link {
        color: $accent;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("o", "open_game", "Open game", show=True),
        Binding("enter", "open_game", "Open game", show=False),
    ]

    can_focus = True

    def __init__(
        self,
        game: GameRecord,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.game = game

    @override
    def compose(self) -> ComposeResult:
        info = get_game_display_info(self.game)
        yield Static(Text(info["title"]), classes="game-title")
        yield Static(
            Text(f"👤 {info['playing']} playing   ◉ {info['visits']} visits"),
            classes="game-stats",
        )
        yield Static(Text(info["description"]), classes="game-description")
        yield Static(Text(f"Cover: {info['cover']}"), classes="game-stats")
        yield Static(Text(f"View on Roblox → {info['url']}"), classes="game-link")

    def action_open_game(self) -> None:
        """Open the game's page in the browser."""
        log.info("Opening game page", place_id=self.game.place_id, url=self.game.url)
        self.app.open_url(self.game.url)
