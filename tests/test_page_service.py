"""Tests for page assembly and totals aggregation."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from hypothesis import given, strategies as st

from studio_site.models.game import GameRecord
from studio_site.services.catalog import base_games
from studio_site.services.gallery import GalleryService
from studio_site.services.game_stats import GameStatsService
from studio_site.services.page import PageService, compute_totals


optional_counts = st.none() | st.integers(min_value=0, max_value=10**12)

game_records = st.builds(
    GameRecord,
    place_id=st.integers(min_value=1, max_value=10**15),
    title=st.text(min_size=1, max_size=20),
    cover=st.just("/gallery/cover.png"),
    url=st.just("https://www.roblox.com/games/1"),
    playing=optional_counts,
    visits=optional_counts,
)


@given(st.lists(game_records, max_size=10))
def test_totals_equal_sum_of_per_game_values(games: list[GameRecord]) -> None:
    """Totals are the sums of per-record values, unknown counts as 0."""
    total_visits, total_playing = compute_totals(games)

    assert total_visits == sum(g.visits for g in games if g.visits is not None)
    assert total_playing == sum(g.playing for g in games if g.playing is not None)


def test_totals_of_no_games_are_zero() -> None:
    assert compute_totals([]) == (0, 0)


def test_base_games_are_fresh_each_call() -> None:
    first = base_games()
    second = base_games()

    assert first == second
    assert first is not second
    assert [g.place_id for g in first] == [131452190170307, 101928524081695]


@pytest.mark.asyncio
async def test_render_combines_gallery_games_and_totals() -> None:
    gallery = MagicMock(spec=GalleryService)
    gallery.resolve_images.return_value = ["/gallery/a.png", "/gallery/b.jpg"]

    enriched = [
        GameRecord(place_id=1, title="One", cover="/1.png", url="https://1", playing=3, visits=100),
        GameRecord(place_id=2, title="Two", cover="/2.png", url="https://2", playing=None, visits=50),
    ]
    game_stats = AsyncMock(spec=GameStatsService)
    game_stats.enrich_all.return_value = enriched

    static_games = [GameRecord(place_id=1, title="One", cover="/1.png", url="https://1")]
    service = PageService(gallery, game_stats, games_factory=lambda: list(static_games))

    content = await service.render()

    game_stats.enrich_all.assert_awaited_once_with(static_games)
    assert content.gallery == ["/gallery/a.png", "/gallery/b.jpg"]
    assert content.games == enriched
    assert content.total_visits == 150
    assert content.total_playing == 3


@pytest.mark.asyncio
async def test_render_with_every_lookup_failing_shows_static_catalog() -> None:
    """When enrichment degrades, the page still renders the static records."""
    gallery = MagicMock(spec=GalleryService)
    gallery.resolve_images.return_value = []
    game_stats = AsyncMock(spec=GameStatsService)
    game_stats.enrich_all.side_effect = lambda games: games

    content = await PageService(gallery, game_stats).render()

    assert content.games == base_games()
    assert (content.total_visits, content.total_playing) == (0, 0)
