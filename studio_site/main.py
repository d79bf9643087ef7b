"""Main entry point for the Yanns Studios site application.

This module provides the application entry point with:
- Command-line argument parsing
- Application initialization and dependency injection
- Graceful shutdown handling
"""

import argparse
import asyncio
import signal
import sys
from pathlib import Path

import structlog

from studio_site import __version__
from studio_site.models import AppConfig
from studio_site.services.config import ConfigurationService
from studio_site.services.filesystem import FileSystemService
from studio_site.services.gallery import GalleryService
from studio_site.services.game_stats import GameStatsService
from studio_site.services.http_client import HttpClientService
from studio_site.services.logging import setup_logging
from studio_site.services.page import PageService


log = structlog.stdlib.get_logger()


class ApplicationContext:
    """Container for application services and state.

    Services are built lazily from the loaded configuration and shared by
    every render cycle of the process.
    """

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path: Path | None = config_path

        # Services (initialized lazily)
        self._config_service: ConfigurationService | None = None
        self._http_client: HttpClientService | None = None
        self._filesystem: FileSystemService | None = None
        self._gallery: GalleryService | None = None
        self._game_stats: GameStatsService | None = None
        self._page_service: PageService | None = None

        self._config: AppConfig | None = None
        self._shutdown_requested: bool = False

    @property
    def config_service(self) -> ConfigurationService:
        if self._config_service is None:
            self._config_service = ConfigurationService(config_path=self._config_path)
        return self._config_service

    @property
    def config(self) -> AppConfig:
        if self._config is None:
            self._config = self.config_service.load_config()
        return self._config

    @property
    def http_client(self) -> HttpClientService:
        if self._http_client is None:
            self._http_client = HttpClientService(timeout=self.config.request_timeout)
        return self._http_client

    @property
    def filesystem(self) -> FileSystemService:
        if self._filesystem is None:
            self._filesystem = FileSystemService()
        return self._filesystem

    @property
    def gallery(self) -> GalleryService:
        if self._gallery is None:
            self._gallery = GalleryService(
                filesystem=self.filesystem,
                gallery_directory=self.config.gallery_directory,
                url_prefix=self.config.gallery_url_prefix,
            )
        return self._gallery

    @property
    def game_stats(self) -> GameStatsService:
        if self._game_stats is None:
            self._game_stats = GameStatsService(
                http_client=self.http_client,
                universe_api_url=self.config.universe_api_url,
                games_api_url=self.config.games_api_url,
            )
        return self._game_stats

    @property
    def page_service(self) -> PageService:
        if self._page_service is None:
            self._page_service = PageService(gallery=self.gallery, game_stats=self.game_stats)
        return self._page_service

    def request_shutdown(self) -> None:
        """Request graceful shutdown of the application."""
        self._shutdown_requested = True
        log.info("Shutdown requested")

    @property
    def shutdown_requested(self) -> bool:
        return self._shutdown_requested

    async def cleanup(self) -> None:
        """Clean up resources and close connections."""
        log.info("Cleaning up application resources")
        if self._http_client is not None:
            await self._http_client.close()
            self._http_client = None
        log.info("Application cleanup complete")


class ParsedArgs:
    """Type-safe container for parsed command-line arguments."""

    def __init__(
        self,
        config: Path | None,
        log_level: str | None,
        log_dir: Path | None,
        no_tui: bool,
    ) -> None:
        self.config: Path | None = config
        self.log_level: str | None = log_level
        self.log_dir: Path | None = log_dir
        self.no_tui: bool = no_tui


def parse_arguments(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Parsed arguments container
    """
    parser = argparse.ArgumentParser(
        prog="yanns-studios-site",
        description="The Yanns Studios site: games, live player statistics and links",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  yanns-studios-site                    Start the TUI application
  yanns-studios-site --no-tui           Print the page content and exit
  yanns-studios-site --config ./site.json --log-level DEBUG
        """
    )

    _ = parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    _ = parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: ~/.config/yanns-studios-site/config.json)"
    )

    _ = parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Set the logging level (default: from configuration, INFO)"
    )

    _ = parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for log files (default: ./logs in TUI mode, console only otherwise)"
    )

    _ = parser.add_argument(
        "--no-tui",
        action="store_true",
        help="Print the page content as text instead of starting the TUI"
    )

    ns = parser.parse_args(argv)

    return ParsedArgs(
        config=ns.config,
        log_level=ns.log_level,
        log_dir=ns.log_dir,
        no_tui=bool(ns.no_tui),
    )


def setup_signal_handlers(context: ApplicationContext) -> None:
    """Set up signal handlers for graceful shutdown."""
    def signal_handler(signum: int, frame: object) -> None:
        _ = frame
        log.info("Received signal", signal=signal.Signals(signum).name)
        context.request_shutdown()
        raise KeyboardInterrupt

    _ = signal.signal(signal.SIGTERM, signal_handler)

    log.debug("Signal handlers registered")


async def run_tui(context: ApplicationContext) -> int:
    """Run the TUI application.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    from studio_site.ui.app import StudioSiteApp

    log.info("Starting TUI application")

    try:
        app = StudioSiteApp(
            page_service=context.page_service,
            view_line_offset=context.config.view_line_offset,
        )
        await app.run_async()

        log.info("TUI application exited normally")
        return 0

    except Exception as e:
        log.error("TUI application error", error=str(e), exc_info=True)
        return 1
    finally:
        await context.cleanup()


async def run_headless(context: ApplicationContext) -> int:
    """Run one render cycle and print the page as text."""
    from studio_site.ui.text import format_page_text

    try:
        content = await context.page_service.render()
        print(format_page_text(content))
        return 0
    finally:
        await context.cleanup()


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the application."""
    args = parse_arguments(argv)

    context = ApplicationContext(config_path=args.config)

    log_dir = args.log_dir
    if log_dir is None and not args.no_tui:
        log_dir = Path("logs")

    log_level = args.log_level or "INFO"
    _ = setup_logging(log_level=log_level, log_dir=log_dir, tui_mode=not args.no_tui)

    # Without --log-level the configured level applies once the config is loaded
    if args.log_level is None and context.config.log_level != log_level:
        _ = setup_logging(log_level=context.config.log_level, log_dir=log_dir, tui_mode=not args.no_tui)

    log.info(
        "Starting Yanns Studios site",
        version=__version__,
        config_path=str(context.config_service.config_path),
    )

    setup_signal_handlers(context)

    try:
        if args.no_tui:
            exit_code = asyncio.run(run_headless(context))
        else:
            exit_code = asyncio.run(run_tui(context))

    except KeyboardInterrupt:
        log.info("Application interrupted by user")
        exit_code = 130

    except Exception as e:
        log.error("Unhandled exception", error=str(e), exc_info=True)
        print(f"Fatal error: {e}", file=sys.stderr)
        exit_code = 1

    log.info("Application exiting", exit_code=exit_code)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
