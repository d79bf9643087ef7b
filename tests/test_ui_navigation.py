"""Property-based tests for UI navigation and page presentation."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest
from textual.containers import VerticalScroll
from textual.widgets import Button
from hypothesis import given, strategies as st, settings

from studio_site.models.game import GameRecord
from studio_site.models.page import PageContent, SectionKey
from studio_site.services.catalog import (
    DEFAULT_GAME_DESCRIPTION,
    NAV_SECTIONS,
    SOCIAL_LINKS,
    base_games,
)
from studio_site.services.page import PageService
from studio_site.ui import StudioSiteApp, format_page_text
from studio_site.ui.screens import SiteScreen, footer_text, social_link_text
from studio_site.ui.widgets import (
    GameCard,
    MarqueeRow,
    NavBar,
    StatsWidget,
    format_count,
    get_game_display_info,
    marquee_window,
    resolve_active_section,
)


SECTION_ORDER = [section.key for section in NAV_SECTIONS]


@st.composite
def stacked_sections(draw: st.DrawFn) -> list[tuple[SectionKey, int, int]]:
    """Generate contiguous section spans as laid out on a scrolled page."""
    top = draw(st.integers(min_value=-200, max_value=200))
    bounds = []
    for key in SECTION_ORDER:
        height = draw(st.integers(min_value=1, max_value=80))
        bounds.append((key, top, top + height - 1))
        top += height
    return bounds


class TestActiveSection:
    """Tests for scroll-driven section highlighting."""

    @given(stacked_sections(), st.integers(min_value=-300, max_value=500))
    @settings(max_examples=200)
    def test_exactly_one_section_is_active(
        self,
        bounds: list[tuple[SectionKey, int, int]],
        view_line: int,
    ) -> None:
        """For any scroll position, exactly one section is reported active.

        The section whose span contains the view line wins; outside every
        span the top section is reported.
        """
        active = resolve_active_section(bounds, view_line)

        containing = [key for key, top, bottom in bounds if top <= view_line <= bottom]
        assert len(containing) <= 1
        assert active == (containing[0] if containing else SectionKey.TOP)

    def test_last_matching_section_wins_on_overlap(self) -> None:
        bounds = [
            (SectionKey.TOP, 0, 10),
            (SectionKey.GAMES, 10, 20),
            (SectionKey.FIND, 21, 30),
        ]

        assert resolve_active_section(bounds, 10) == SectionKey.GAMES

    def test_boundaries_are_inclusive(self) -> None:
        bounds = [(SectionKey.TOP, 0, 9), (SectionKey.GAMES, 10, 19), (SectionKey.FIND, 20, 29)]

        assert resolve_active_section(bounds, 9) == SectionKey.TOP
        assert resolve_active_section(bounds, 10) == SectionKey.GAMES
        assert resolve_active_section(bounds, 29) == SectionKey.FIND
        assert resolve_active_section(bounds, 30) == SectionKey.TOP

    def test_no_sections_reports_default(self) -> None:
        assert resolve_active_section([], 5) == SectionKey.TOP
        assert resolve_active_section([], 5, default=SectionKey.FIND) == SectionKey.FIND

    def test_nav_sections_cover_page_in_order(self) -> None:
        assert SECTION_ORDER == [SectionKey.TOP, SectionKey.GAMES, SectionKey.FIND]
        anchors = [section.anchor for section in NAV_SECTIONS]
        assert len(anchors) == len(set(anchors))
        assert all(section.label for section in NAV_SECTIONS)


class TestMarqueeWindow:
    """Tests for the looping image strip."""

    @given(
        images=st.lists(st.text(min_size=1, max_size=10), min_size=1, max_size=8),
        offset=st.integers(min_value=0, max_value=100),
        count=st.integers(min_value=0, max_value=12),
        reverse=st.booleans(),
    )
    def test_window_walks_the_repeated_strip(
        self,
        images: list[str],
        offset: int,
        count: int,
        reverse: bool,
    ) -> None:
        window = marquee_window(images, offset, count, reverse)

        assert len(window) == count
        step = -offset if reverse else offset
        for i, src in enumerate(window):
            assert src == images[(step + i) % len(images)]

    def test_full_loop_returns_to_start(self) -> None:
        images = ["/gallery/a.png", "/gallery/b.png", "/gallery/c.png"]

        assert marquee_window(images, len(images), 2) == marquee_window(images, 0, 2)
        assert marquee_window(images, 1, 3, reverse=True) == ["/gallery/c.png", "/gallery/a.png", "/gallery/b.png"]

    def test_empty_strip_shows_nothing(self) -> None:
        assert marquee_window([], 3, 4) == []


class TestPresentation:
    """Tests for the strings the page displays."""

    @given(st.none() | st.integers(min_value=0, max_value=10**12))
    def test_counts_use_thousands_separators(self, value: int | None) -> None:
        text = format_count(value)

        assert int(text.replace(",", "")) == (value or 0)

    def test_game_display_info_defaults(self) -> None:
        game = GameRecord(place_id=1, title="BRAINROT TAG", cover="/gallery/c.png", url="https://x")

        info = get_game_display_info(game)

        assert info["playing"] == "0"
        assert info["visits"] == "0"
        assert info["description"] == DEFAULT_GAME_DESCRIPTION

    def test_game_display_info_live_values(self) -> None:
        game = GameRecord(
            place_id=1,
            title="Paint or Die",
            cover="/gallery/c.png",
            url="https://x",
            playing=1234,
            visits=9876543,
            description="Live description",
        )

        info = get_game_display_info(game)

        assert info["playing"] == "1,234"
        assert info["visits"] == "9,876,543"
        assert info["description"] == "Live description"

    def test_footer_carries_year(self) -> None:
        assert footer_text(2031) == "© 2031 Yanns Studios. All rights reserved."
        assert str(datetime.now().year) in footer_text()

    def test_find_me_captions(self) -> None:
        assert [(link.label, link.caption) for link in SOCIAL_LINKS] == [
            ("Roblox Profile", "View User"),
            ("Discord", "yann4"),
        ]

    def test_social_link_label_carries_destination(self) -> None:
        link = SOCIAL_LINKS[0]

        text = social_link_text(link)

        assert text.plain == "Roblox Profile  View User →"
        label_spans = [span for span in text.spans if span.end <= len(link.label)]
        assert label_spans
        assert all(span.style.link == link.url for span in label_spans)

    def test_marquee_row_keeps_widget_visibility(self) -> None:
        row = MarqueeRow(["/gallery/a.png", "/gallery/b.png"], 34.0, card_count=3)

        assert row.card_count == 3
        assert row.visible

    def test_page_text_lists_every_part(self) -> None:
        games = [
            GameRecord(place_id=1, title="One", cover="/1.png", url="https://one", playing=2, visits=1500),
        ]
        content = PageContent(
            gallery=["/gallery/a.png"],
            games=games,
            total_visits=1500,
            total_playing=2,
            rendered_at=datetime(2030, 5, 1, 12, 0, 0),
        )

        text = format_page_text(content)

        assert "/gallery/a.png" in text
        assert "Total Visits: 1,500" in text
        assert "Active Players: 2" in text
        assert "- One (2 playing, 1,500 visits)" in text
        for link in SOCIAL_LINKS:
            assert link.url in text
        assert text.endswith(footer_text(2030))


def _content() -> PageContent:
    games = base_games()
    return PageContent(
        gallery=["/gallery/a.png", "/gallery/b.png"],
        games=games,
        total_visits=0,
        total_playing=0,
        rendered_at=datetime(2030, 1, 1, 9, 30, 0),
    )


class TestSiteScreen:
    """Pilot tests driving the running application."""

    @pytest.mark.asyncio
    async def test_render_cycle_fills_page(self) -> None:
        page_service = AsyncMock(spec=PageService)
        page_service.render.return_value = _content()
        app = StudioSiteApp(page_service)

        async with app.run_test(size=(100, 30)) as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()

            screen = app.screen
            assert isinstance(screen, SiteScreen)
            assert screen.content == _content()
            assert len(screen.query(GameCard)) == 2
            assert screen.query_one(StatsWidget).total_visits == 0
            assert screen.query_one(NavBar).active == SectionKey.TOP
            assert screen.query_one("#marquee-0", MarqueeRow).card_count == 4
            assert screen.query_one("#marquee-0", MarqueeRow).visible
            assert len(screen.query(".social-link")) == len(SOCIAL_LINKS)

        page_service.render.assert_awaited()

    @pytest.mark.asyncio
    async def test_render_failure_keeps_screen_usable(self) -> None:
        page_service = AsyncMock(spec=PageService)
        page_service.render.side_effect = RuntimeError("boom")
        app = StudioSiteApp(page_service)

        async with app.run_test(size=(100, 30)) as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()

            screen = app.screen
            assert isinstance(screen, SiteScreen)
            assert screen.content is None
            assert len(screen.query(GameCard)) == 0

    @pytest.mark.asyncio
    async def test_section_keys_move_highlight(self) -> None:
        page_service = AsyncMock(spec=PageService)
        page_service.render.return_value = _content()
        app = StudioSiteApp(page_service)

        async with app.run_test(size=(100, 24)) as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()

            navbar = app.screen.query_one(NavBar)

            await pilot.press("2")
            await pilot.wait_for_scheduled_animations()
            await pilot.pause()
            assert navbar.active == SectionKey.GAMES

            await pilot.press("1")
            await pilot.wait_for_scheduled_animations()
            await pilot.pause()
            assert navbar.active == SectionKey.TOP

    @pytest.mark.asyncio
    async def test_reload_runs_another_cycle(self) -> None:
        page_service = AsyncMock(spec=PageService)
        page_service.render.return_value = _content()
        app = StudioSiteApp(page_service)

        async with app.run_test(size=(100, 30)) as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()

            await pilot.press("r")
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()

        assert page_service.render.await_count == 2

    @pytest.mark.asyncio
    async def test_scrolling_page_re_derives_active_section(self) -> None:
        """Scrolling the page, not a nav selection, decides the highlighted section."""
        page_service = AsyncMock(spec=PageService)
        page_service.render.return_value = _content()
        app = StudioSiteApp(page_service)

        async with app.run_test(size=(100, 24)) as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()

            screen = app.screen
            page = screen.query_one("#page", VerticalScroll)
            navbar = screen.query_one(NavBar)
            games = screen.query_one("#games")

            page.scroll_to(y=games.virtual_region.y, animate=False)
            await pilot.pause()
            assert navbar.active == SectionKey.GAMES

            page.scroll_end(animate=False)
            await pilot.pause()
            assert navbar.active == SectionKey.FIND

            page.scroll_home(animate=False)
            await pilot.pause()
            assert navbar.active == SectionKey.TOP

            await pilot.press("3")
            await pilot.wait_for_scheduled_animations()
            await pilot.pause()
            page.scroll_to(y=games.virtual_region.y, animate=False)
            await pilot.pause()
            assert navbar.active == SectionKey.GAMES

    @pytest.mark.asyncio
    async def test_exactly_one_link_highlighted_while_scrolling(self) -> None:
        page_service = AsyncMock(spec=PageService)
        page_service.render.return_value = _content()
        app = StudioSiteApp(page_service)

        async with app.run_test(size=(100, 24)) as pilot:
            await pilot.pause()
            await app.workers.wait_for_complete()
            await pilot.pause()

            screen = app.screen
            assert isinstance(screen, SiteScreen)
            page = screen.query_one("#page", VerticalScroll)
            navbar = screen.query_one(NavBar)
            assert page.max_scroll_y > 0

            for y in range(0, page.max_scroll_y + 1, 4):
                page.scroll_to(y=y, animate=False)
                await pilot.pause()

                highlighted = [button for button in navbar.query(Button) if button.has_class("-active")]
                assert len(highlighted) == 1
                assert navbar.active == resolve_active_section(screen.section_bounds(), screen.view_line)
