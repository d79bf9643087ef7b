"""Plain-text rendition of the page for headless runs."""

from studio_site.models.page import PageContent
from studio_site.services.catalog import HEADLINE, SOCIAL_LINKS, STUDIO_NAME, TAGLINE

from .screens.site import footer_text
from .widgets.game_card import format_count, get_game_display_info


def format_page_text(content: PageContent) -> str:
    """Render page content as the lines printed in --no-tui mode."""
    lines = [
        STUDIO_NAME,
        "=" * len(STUDIO_NAME),
        HEADLINE,
        TAGLINE,
        "",
        f"Gallery: {len(content.gallery)} images",
    ]
    lines.extend(f"  {src}" for src in content.gallery)

    lines += [
        "",
        f"Total Visits: {format_count(content.total_visits)}",
        f"Active Players: {format_count(content.total_playing)}",
        "",
        "My Games",
    ]
    for game in content.games:
        info = get_game_display_info(game)
        lines += [
            f"- {info['title']} ({info['playing']} playing, {info['visits']} visits)",
            f"  {info['description']}",
            f"  {info['url']}",
        ]

    lines += ["", "Find Me"]
    lines.extend(f"- {link.label}: {link.url}" for link in SOCIAL_LINKS)
    lines += ["", footer_text(content.rendered_at.year)]
    return "\n".join(lines)
