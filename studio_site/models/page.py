"""Page content models shared by the services and the UI."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from .game import GameRecord


class SectionKey(Enum):
    """Labeled page sections, in page order."""
    TOP = "top"
    GAMES = "games"
    FIND = "find"


@dataclass(frozen=True)
class NavSection:
    """A navigation entry pointing at a page section."""
    key: SectionKey
    label: str
    anchor: str


@dataclass(frozen=True)
class SocialLink:
    """An outbound link shown in the Find Me section."""
    label: str
    caption: str
    url: str


@dataclass(frozen=True)
class PageContent:
    """Everything one render cycle produces for the page."""
    gallery: list[str]
    games: list[GameRecord]
    total_visits: int
    total_playing: int
    rendered_at: datetime
