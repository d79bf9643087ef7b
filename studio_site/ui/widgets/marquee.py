"""Auto-scrolling image marquee for the hero section."""

from pathlib import PurePosixPath
from typing import ClassVar

from rich.text import Text
from textual.reactive import reactive
from textual.timer import Timer
from textual.widgets import Static


def marquee_window(
    images: list[str],
    offset: int,
    count: int,
    reverse: bool = False,
) -> list[str]:
    """Return the ``count`` images visible at ``offset`` in a looping strip.

    The strip is the image list repeated end to end; a reversed row moves
    the other way.
    """
    if not images or count <= 0:
        return []
    size = len(images)
    step = -offset if reverse else offset
    return [images[(step + i) % size] for i in range(count)]


class MarqueeRow(Static):
    """One row of image cards advancing on a timer."""

    DEFAULT_CSS: ClassVar[str] = """
    MarqueeRow {
        height: 3;
        width: 100%;
        color: $text-muted;
        border: round $primary-darken-3;
        padding: 0 1;
    }
    """

    position: reactive[int] = reactive(0)

    def __init__(
        self,
        images: list[str],
        loop_seconds: float,
        reverse: bool = False,
        card_count: int = 4,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the marquee row.

        Args:
            images: Image references to cycle through
            loop_seconds: Time for one full pass over the images
            reverse: Whether the row moves in the opposite direction
            card_count: Number of cards shown at once
        """
        super().__init__(name=name, id=id, classes=classes)
        self.images = list(images)
        self.loop_seconds = loop_seconds
        self.reverse = reverse
        self.card_count = card_count
        self._timer: Timer | None = None

    def on_mount(self) -> None:
        self._restart_timer()
        self.update(self._render_cards())

    def set_images(self, images: list[str]) -> None:
        self.images = list(images)
        self.position = 0
        self._restart_timer()
        self.update(self._render_cards())

    def _restart_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None
        if self.images:
            self._timer = self.set_interval(self.loop_seconds / len(self.images), self._advance)

    def _advance(self) -> None:
        self.position = (self.position + 1) % max(len(self.images), 1)

    def watch_position(self, position: int) -> None:
        self.update(self._render_cards())

    def _render_cards(self) -> Text:
        window = marquee_window(self.images, self.position, self.card_count, self.reverse)
        return Text("  ".join(f"▣ {PurePosixPath(src).name}" for src in window), no_wrap=True, overflow="ellipsis")
