"""The studio's one-page site: hero, games and Find Me sections."""

import asyncio
from datetime import datetime
from typing import ClassVar, override

from rich.style import Style
from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding, BindingType
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Footer, Static
from textual.worker import Worker, WorkerState

import structlog

from studio_site.models.page import PageContent, SectionKey, SocialLink
from studio_site.services.catalog import (
    HEADLINE,
    NAV_SECTIONS,
    SOCIAL_LINKS,
    STUDIO_NAME,
    TAGLINE,
)
from studio_site.ui.widgets import (
    GameCard,
    MarqueeRow,
    NavBar,
    StatsWidget,
    resolve_active_section,
)

from .base import BaseScreen

log = structlog.stdlib.get_logger()

# Seconds for one full marquee pass, top row then bottom row
MARQUEE_LOOP_SECONDS: tuple[float, float] = (34.0, 40.0)


def footer_text(year: int | None = None) -> str:
    return f"© {year or datetime.now().year} {STUDIO_NAME}. All rights reserved."


def social_link_text(link: SocialLink) -> Text:
    """Render a Find Me entry with its label linked to the destination."""
    text = Text()
    text.append(link.label, style=Style(bold=True, link=link.url))
    text.append(f"  {link.caption} →")
    return text


class SiteScreen(BaseScreen):
    """Scrollable page whose navigation bar follows the section in view.

    Page content comes from one render cycle of the page service, run in a
    worker so the screen stays responsive while statistics load.
    """

    SCREEN_TITLE: ClassVar[str] = STUDIO_NAME
    SCREEN_NAME: ClassVar[str] = "site"

    CSS: ClassVar[str] = """
    #page {
        height: 1fr;
    }

    .section {
        height: auto;
        padding: 1 4;
    }

    #top {
        min-height: 20;
        background: $panel;
    }

    .headline {
        text-style: bold;
        color: $text;
        margin-top: 2;
    }

    .tagline {
        color: $text-muted;
        margin-bottom: 1;
    }

    .hero-actions {
        height: auto;
    }

    .hero-actions Button {
        margin-right: 2;
    }

    .section-title {
        text-style: bold;
        color: $primary;
        margin: 1 0;
    }

    #games-status {
        color: $text-muted;
    }

    #game-cards {
        height: auto;
    }

    .social-link {
        padding: 1 2;
        margin-bottom: 1;
        border: round $secondary;
    }

    #footer-note {
        color: $text-muted;
        padding: 1 4;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("1", "goto_section('top')", "Home", show=False),
        Binding("2", "goto_section('games')", "Games", show=False),
        Binding("3", "goto_section('find')", "Find Me", show=False),
    ]

    class PageRendered(Message):
        """Message when a render cycle has produced page content."""

        content: PageContent

        def __init__(self, content: PageContent) -> None:
            super().__init__()
            self.content = content

    class PageFailed(Message):
        """Message when the render cycle itself failed."""

        error: Exception

        def __init__(self, error: Exception) -> None:
            super().__init__()
            self.error = error

    def __init__(self, view_line_offset: int = 1, name: str | None = None) -> None:
        """Initialize the site screen.

        Args:
            view_line_offset: Rows below the navigation bar where the
                section under the line becomes active
        """
        super().__init__(name=name)
        self.view_line_offset = view_line_offset
        self.content: PageContent | None = None
        self._page_worker: Worker[None] | None = None

    @override
    def compose(self) -> ComposeResult:
        yield NavBar(id="navbar")
        with VerticalScroll(id="page"):
            with Vertical(id="top", classes="section"):
                yield MarqueeRow([], MARQUEE_LOOP_SECONDS[0], id="marquee-0")
                yield MarqueeRow([], MARQUEE_LOOP_SECONDS[1], reverse=True, id="marquee-1")
                yield Static(HEADLINE, classes="headline")
                yield Static(TAGLINE, classes="tagline")
                with Horizontal(classes="hero-actions"):
                    yield Button("Our Games", id="hero-games", variant="primary")
                    yield Button("Contact / Find Me", id="hero-find")
            with Vertical(id="games", classes="section"):
                yield StatsWidget(id="stats")
                yield Static("My Games", classes="section-title")
                yield Static("Loading live statistics…", id="games-status")
                yield Vertical(id="game-cards")
            with Vertical(id="find", classes="section"):
                yield Static("Find Me", classes="section-title")
                for link in SOCIAL_LINKS:
                    yield Static(social_link_text(link), classes="social-link")
                yield Static(footer_text(), id="footer-note")
        yield Footer()

    @override
    async def on_mount(self) -> None:
        await super().on_mount()
        page = self.query_one("#page", VerticalScroll)
        self.watch(page, "scroll_y", self._on_page_scroll, init=False)
        self.call_after_refresh(self.update_active_section)
        self.load_page()

    @property
    def view_line(self) -> int:
        """Screen row used to decide which section is in view."""
        navbar = self.query_one(NavBar)
        return navbar.region.bottom + self.view_line_offset

    def section_bounds(self) -> list[tuple[SectionKey, int, int]]:
        """Current screen-row span of every section, in page order."""
        page = self.query_one("#page", VerticalScroll)
        bounds = []
        for section in NAV_SECTIONS:
            widget = self.query_one(f"#{section.anchor}")
            top = page.region.y + widget.virtual_region.y - round(page.scroll_y)
            bottom = top + widget.outer_size.height - 1
            bounds.append((section.key, top, bottom))
        return bounds

    def update_active_section(self) -> None:
        """Re-derive the highlighted navigation link from the scroll position."""
        navbar = self.query_one(NavBar)
        navbar.active = resolve_active_section(self.section_bounds(), self.view_line)

    def _on_page_scroll(self, _scroll_y: float) -> None:
        self.update_active_section()

    def scroll_to_section(self, key: SectionKey) -> None:
        """Mark a section active and smooth-scroll it to the top of the page."""
        for section in NAV_SECTIONS:
            if section.key == key:
                self.query_one(NavBar).active = key
                page = self.query_one("#page", VerticalScroll)
                page.scroll_to_widget(self.query_one(f"#{section.anchor}"), animate=True, top=True)
                return

    def on_nav_bar_section_selected(self, event: NavBar.SectionSelected) -> None:
        self.scroll_to_section(event.key)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "hero-games":
            self.scroll_to_section(SectionKey.GAMES)
        elif event.button.id == "hero-find":
            self.scroll_to_section(SectionKey.FIND)

    def action_goto_section(self, anchor: str) -> None:
        self.scroll_to_section(SectionKey(anchor))

    def load_page(self) -> None:
        """Start a fresh render cycle in a worker."""
        self.query_one("#games-status", Static).update("Loading live statistics…")
        self._page_worker = self.run_worker(
            self._render_page(),
            name="page_worker",
            exclusive=True,
        )

    async def _render_page(self) -> None:
        """Run the page service (executed in worker)."""
        try:
            content = await self.site_app.page_service.render()
            self.post_message(self.PageRendered(content))
        except asyncio.CancelledError:
            log.info("Page worker cancelled")
            raise
        except Exception as e:
            log.error("Page render failed", error=str(e))
            self.post_message(self.PageFailed(e))

    async def on_site_screen_page_rendered(self, event: PageRendered) -> None:
        await self.show_content(event.content)

    def on_site_screen_page_failed(self, event: PageFailed) -> None:
        self.query_one("#games-status", Static).update("Live statistics are unavailable.")
        self.handle_exception(event.error, operation="render_page")

    async def show_content(self, content: PageContent) -> None:
        """Fill the sections with the content of a render cycle."""
        self.content = content

        for marquee in self.query(MarqueeRow):
            marquee.set_images(content.gallery)

        self.query_one(StatsWidget).update_totals(content.total_visits, content.total_playing)

        cards = self.query_one("#game-cards", Vertical)
        await cards.remove_children()
        await cards.mount_all([GameCard(game) for game in content.games])

        self.query_one("#games-status", Static).update(
            f"Updated {content.rendered_at:%H:%M:%S}"
        )
        log.info("Page content displayed", games=len(content.games), images=len(content.gallery))
        self.call_after_refresh(self.update_active_section)

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if event.worker.name == "page_worker":
            log.debug("Page worker state changed", state=event.state)
            if event.state == WorkerState.CANCELLED:
                self.query_one("#games-status", Static).update("Loading cancelled.")
