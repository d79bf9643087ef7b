"""Custom widgets for the site screen."""

from .game_card import GameCard, StatsWidget, format_count, get_game_display_info
from .marquee import MarqueeRow, marquee_window
from .navbar import NavBar, resolve_active_section

__all__ = [
    "GameCard",
    "MarqueeRow",
    "NavBar",
    "StatsWidget",
    "format_count",
    "get_game_display_info",
    "marquee_window",
    "resolve_active_section",
]
