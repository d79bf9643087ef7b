"""Tests for argument parsing and application wiring."""

import json
import tempfile
from datetime import datetime
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from studio_site import __version__
from studio_site.main import ApplicationContext, parse_arguments, run_headless
from studio_site.models import PageContent
from studio_site.services.catalog import base_games
from studio_site.services.page import PageService


class TestParseArguments:
    """Tests for the command-line interface."""

    def test_defaults(self) -> None:
        args = parse_arguments([])

        assert args.config is None
        assert args.log_level is None
        assert args.log_dir is None
        assert args.no_tui is False

    def test_all_options(self) -> None:
        args = parse_arguments([
            "--config", "site.json",
            "--log-level", "DEBUG",
            "--log-dir", "logs",
            "--no-tui",
        ])

        assert args.config == Path("site.json")
        assert args.log_level == "DEBUG"
        assert args.log_dir == Path("logs")
        assert args.no_tui is True

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(SystemExit):
            parse_arguments(["--log-level", "LOUD"])

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            parse_arguments(["--version"])

        assert __version__ in capsys.readouterr().out


class TestApplicationContext:
    """Services are built from the loaded configuration."""

    @pytest.mark.asyncio
    async def test_services_follow_configuration(self) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = Path(temp_dir) / "config.json"
            config_path.write_text(
                json.dumps({
                    "gallery_directory": str(Path(temp_dir) / "images"),
                    "gallery_url_prefix": "/img",
                    "universe_api_url": "https://universes.example.test/v1",
                    "games_api_url": "https://games.example.test/v1",
                    "request_timeout": 3.5,
                    "log_level": "WARNING",
                    "view_line_offset": 2,
                }),
                encoding="utf-8",
            )
            context = ApplicationContext(config_path=config_path)

            assert context.http_client.timeout == 3.5
            assert context.gallery.url_prefix == "/img"
            assert context.gallery.gallery_directory == Path(temp_dir) / "images"
            assert context.game_stats.universe_url(1) == "https://universes.example.test/v1/places/1/universe"
            assert context.page_service.gallery is context.gallery
            assert context.page_service is context.page_service

            await context.cleanup()

    def test_shutdown_flag(self) -> None:
        context = ApplicationContext(config_path=Path("/nonexistent/config.json"))

        assert not context.shutdown_requested
        context.request_shutdown()
        assert context.shutdown_requested


@pytest.mark.asyncio
async def test_headless_run_prints_page(capsys: pytest.CaptureFixture[str]) -> None:
    context = ApplicationContext(config_path=Path("/nonexistent/config.json"))
    page_service = AsyncMock(spec=PageService)
    page_service.render.return_value = PageContent(
        gallery=["/gallery/chase-orca.jpg"],
        games=base_games(),
        total_visits=0,
        total_playing=0,
        rendered_at=datetime(2030, 1, 1),
    )
    context._page_service = page_service

    exit_code = await run_headless(context)

    assert exit_code == 0
    out = capsys.readouterr().out
    assert "BRAINROT TAG" in out
    assert "/gallery/chase-orca.jpg" in out
