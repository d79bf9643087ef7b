"""Sticky navigation bar with scroll-driven section highlighting."""

from collections.abc import Sequence
from typing import ClassVar, override

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Button, Static

import structlog

from studio_site.models.page import NavSection, SectionKey
from studio_site.services.catalog import NAV_SECTIONS, STUDIO_NAME

log = structlog.stdlib.get_logger()


def resolve_active_section(
    bounds: Sequence[tuple[SectionKey, int, int]],
    view_line: int,
    default: SectionKey = SectionKey.TOP,
) -> SectionKey:
    """Pick the section that crosses the view line.

    Args:
        bounds: (key, top, bottom) for each section in page order, in screen rows
        view_line: Screen row just below the navigation bar
        default: Section to report when none crosses the line

    Returns:
        The last section in page order whose span contains the view line,
        or ``default``
    """
    current = default
    for key, top, bottom in bounds:
        if top <= view_line <= bottom:
            current = key
    return current


class NavBar(Widget):
    """Header with the studio name and one link per page section.

    Exactly one link carries the ``-active`` class at a time.
    """

    DEFAULT_CSS: ClassVar[str] = """
    NavBar {
        dock: top;
        height: 3;
        background: $boost;
        border-bottom: solid $primary-darken-2;
    }

    NavBar #nav-brand {
        width: 1fr;
        padding: 0 2;
        content-align: left middle;
        text-style: bold;
        height: 100%;
    }

    NavBar #nav-links {
        width: auto;
        height: 100%;
    }

    NavBar Button {
        min-width: 10;
        height: 100%;
        border: none;
        background: transparent;
        color: $text-muted;
    }

    NavBar Button.-active {
        color: $text;
        background: $primary;
        text-style: bold;
    }
    """

    class SectionSelected(Message):
        """Posted when a navigation link is chosen."""

        key: SectionKey

        def __init__(self, key: SectionKey) -> None:
            super().__init__()
            self.key = key

    active: reactive[SectionKey] = reactive(SectionKey.TOP)

    def __init__(
        self,
        sections: Sequence[NavSection] = NAV_SECTIONS,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self.sections: tuple[NavSection, ...] = tuple(sections)

    @override
    def compose(self) -> ComposeResult:
        yield Static(STUDIO_NAME, id="nav-brand")
        with Horizontal(id="nav-links"):
            for section in self.sections:
                yield Button(section.label, id=f"nav-{section.anchor}")

    def on_mount(self) -> None:
        self._highlight(self.active)

    def watch_active(self, active: SectionKey) -> None:
        self._highlight(active)

    def _highlight(self, active: SectionKey) -> None:
        for section in self.sections:
            for button in self.query(f"#nav-{section.anchor}").results(Button):
                button.set_class(section.key == active, "-active")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Mark the chosen section active and ask the page to scroll to it."""
        event.stop()
        for section in self.sections:
            if event.button.id == f"nav-{section.anchor}":
                log.debug("Navigation link selected", section=section.key.value)
                self.active = section.key
                self.post_message(self.SectionSelected(section.key))
                return
