"""Live statistics enrichment for the published games."""

import asyncio
import dataclasses
from typing import Any

import structlog

from ..models.game import GameRecord
from .errors import EnrichmentError, handle_error
from .http_client import HttpClientService

log = structlog.stdlib.get_logger()

DEFAULT_UNIVERSE_API_URL = "https://apis.roblox.com/universes/v1"
DEFAULT_GAMES_API_URL = "https://games.roblox.com/v1"


class GameStatsService:
    """Decorates static game records with live platform statistics.

    Each record takes two sequential lookups: place id to universe id, then
    universe id to aggregate statistics. Any failure along the way leaves
    the static record untouched.
    """

    def __init__(
        self,
        http_client: HttpClientService,
        universe_api_url: str = DEFAULT_UNIVERSE_API_URL,
        games_api_url: str = DEFAULT_GAMES_API_URL,
    ) -> None:
        """Initialize the game stats service.

        Args:
            http_client: HTTP client service for making requests
            universe_api_url: Base URL of the place-to-universe endpoint
            games_api_url: Base URL of the games statistics endpoint
        """
        self.http_client = http_client
        self.universe_api_url = universe_api_url.rstrip("/")
        self.games_api_url = games_api_url.rstrip("/")

        log.info(
            "Game stats service initialized",
            universe_api_url=self.universe_api_url,
            games_api_url=self.games_api_url,
        )

    def universe_url(self, place_id: int) -> str:
        return f"{self.universe_api_url}/places/{place_id}/universe"

    def games_url(self) -> str:
        return f"{self.games_api_url}/games"

    async def fetch_universe_id(self, place_id: int) -> int:
        """Resolve the universe id that owns a place.

        Raises:
            httpx.HTTPError: If the request fails or is not successful
            EnrichmentError: If the payload carries no numeric universe id
        """
        url = self.universe_url(place_id)
        payload = await self.http_client.get_json(url)

        universe_id = payload.get("universeId") if isinstance(payload, dict) else None
        if not _is_count(universe_id):
            raise EnrichmentError(
                "Universe lookup returned no universe id",
                place_id=place_id,
                url=url,
            )
        return universe_id

    async def fetch_universe_details(self, universe_id: int) -> dict[str, Any] | None:
        """Fetch the aggregate statistics entry for one universe.

        Returns:
            The first entry of the ``data`` array, or None when it is absent

        Raises:
            httpx.HTTPError: If the request fails or is not successful
            EnrichmentError: If the payload is not a JSON object
        """
        payload = await self.http_client.get_json(
            self.games_url(), params={"universeIds": str(universe_id)}
        )
        if not isinstance(payload, dict):
            raise EnrichmentError(
                "Games lookup returned an unexpected payload",
                url=self.games_url(),
            )

        data = payload.get("data")
        if not isinstance(data, list) or not data or not isinstance(data[0], dict):
            return None
        return data[0]

    async def enrich(self, game: GameRecord) -> GameRecord:
        """Return a copy of the game decorated with live statistics.

        On any failure the input record itself is returned.
        """
        try:
            universe_id = await self.fetch_universe_id(game.place_id)
            details = await self.fetch_universe_details(universe_id)
        except Exception as e:
            handle_error(
                e,
                operation="enrich_game",
                component="game_stats",
                context={"place_id": game.place_id, "title": game.title, "url": self.universe_url(game.place_id)},
            )
            return game

        enriched = merge_details(game, universe_id, details)
        log.info(
            "Game enriched",
            place_id=game.place_id,
            universe_id=universe_id,
            playing=enriched.playing,
            visits=enriched.visits,
        )
        return enriched

    async def enrich_all(self, games: list[GameRecord]) -> list[GameRecord]:
        """Enrich every game concurrently, preserving input order."""
        return list(await asyncio.gather(*(self.enrich(game) for game in games)))


def merge_details(
    game: GameRecord,
    universe_id: int,
    details: dict[str, Any] | None,
) -> GameRecord:
    """Merge a statistics entry into a game, keeping static values for absent fields."""
    details = details or {}

    playing = details.get("playing")
    visits = details.get("visits")
    name = details.get("name")
    description = details.get("description")

    return dataclasses.replace(
        game,
        universe_id=universe_id,
        playing=playing if _is_count(playing) else game.playing,
        visits=visits if _is_count(visits) else game.visits,
        title=name if isinstance(name, str) else game.title,
        description=description if isinstance(description, str) else game.description,
    )


def _is_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
