"""Game-related data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GameRecord:
    """A published game, optionally decorated with live platform statistics."""
    place_id: int
    title: str
    cover: str
    url: str
    universe_id: int | None = None  # Resolved at runtime, never persisted
    playing: int | None = None
    visits: int | None = None
    description: str | None = None
