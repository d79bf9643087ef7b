"""Main Textual application hosting the studio site screen."""

from typing import ClassVar

from textual.app import App
from textual.binding import Binding, BindingType

import structlog

from studio_site.services.page import PageService
from studio_site.services.catalog import STUDIO_NAME

from .screens import SiteScreen

log = structlog.stdlib.get_logger()


class StudioSiteApp(App[None]):
    """Terminal rendition of the studio's one-page site."""

    CSS: ClassVar[str] = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("q", "quit", "Quit", show=True, priority=True),
        Binding("r", "reload", "Reload", show=True),
    ]

    def __init__(
        self,
        page_service: PageService,
        view_line_offset: int = 1,
    ) -> None:
        """Initialize the application.

        Args:
            page_service: Service producing the page content for each render cycle
            view_line_offset: Rows below the navigation bar used as the scroll view line
        """
        super().__init__()
        self.title = STUDIO_NAME  # type: ignore[assignment]
        self.page_service = page_service
        self.view_line_offset = view_line_offset

        log.info("StudioSiteApp initialized")

    async def on_mount(self) -> None:
        await self.push_screen(SiteScreen(view_line_offset=self.view_line_offset))
        log.info("Site screen pushed")

    def action_reload(self) -> None:
        """Run a fresh render cycle on the site screen."""
        if isinstance(self.screen, SiteScreen):
            log.info("Reload requested")
            self.screen.load_page()
