"""Page assembly: one render cycle of gallery, games and totals."""

from collections.abc import Callable
from datetime import datetime

import structlog

from ..models import GameRecord, PageContent
from .catalog import base_games
from .game_stats import GameStatsService
from .gallery import GalleryService

log = structlog.stdlib.get_logger()


def compute_totals(games: list[GameRecord]) -> tuple[int, int]:
    """Sum visits and concurrent players across games, counting unknowns as 0.

    Returns:
        (total_visits, total_playing)
    """
    total_visits = sum(game.visits or 0 for game in games)
    total_playing = sum(game.playing or 0 for game in games)
    return total_visits, total_playing


class PageService:
    """Builds the page content for a render cycle."""

    def __init__(
        self,
        gallery: GalleryService,
        game_stats: GameStatsService,
        games_factory: Callable[[], list[GameRecord]] = base_games,
    ) -> None:
        self.gallery = gallery
        self.game_stats = game_stats
        self.games_factory = games_factory

    async def render(self) -> PageContent:
        """Resolve the gallery, enrich the games and aggregate totals."""
        images = self.gallery.resolve_images()
        games = await self.game_stats.enrich_all(self.games_factory())
        total_visits, total_playing = compute_totals(games)

        log.info(
            "Page rendered",
            images=len(images),
            games=len(games),
            total_visits=total_visits,
            total_playing=total_playing,
        )

        return PageContent(
            gallery=images,
            games=games,
            total_visits=total_visits,
            total_playing=total_playing,
            rendered_at=datetime.now(),
        )
