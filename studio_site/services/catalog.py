"""Static site content: the published games, fallback gallery and links."""

from ..models import GameRecord, NavSection, SectionKey, SocialLink

STUDIO_NAME = "Yanns Studios"
HEADLINE = "Creating games that players enjoy."
TAGLINE = "Providing polished, engaging, and enjoyable gameplay."
DEFAULT_GAME_DESCRIPTION = "Explore and have fun in this experience."

GALLERY_IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    {".png", ".jpg", ".jpeg", ".webp", ".gif", ".avif"}
)

FALLBACK_GALLERY_IMAGES: tuple[str, ...] = (
    "/gallery/chase-orca.jpg",
    "/gallery/chase-red.jpg",
    "/gallery/chase-tree.jpg",
    "/gallery/chase-f-letter.jpg",
    "/gallery/chase-cat-toilet.jpg",
    "/gallery/chase-gold.jpg",
)

NAV_SECTIONS: tuple[NavSection, ...] = (
    NavSection(SectionKey.TOP, "Home", "top"),
    NavSection(SectionKey.GAMES, "Games", "games"),
    NavSection(SectionKey.FIND, "Find Me", "find"),
)

SOCIAL_LINKS: tuple[SocialLink, ...] = (
    SocialLink("Roblox Profile", "View User", "https://www.roblox.com/users/20896161/profile"),
    SocialLink("Discord", "yann4", "https://discord.com/users/yann4"),
)


def base_games() -> list[GameRecord]:
    """Build the static game list for one render cycle."""
    return [
        GameRecord(
            place_id=131452190170307,
            title="BRAINROT TAG",
            cover="/gallery/regular2.png",
            url="https://www.roblox.com/games/131452190170307/BRAINROT-TAG",
            description="Dodge the brainrot and stay alive in the arena.",
        ),
        GameRecord(
            place_id=101928524081695,
            title="Paint or Die",
            cover="/gallery/paint.png",
            url="https://www.roblox.com/games/101928524081695/Paint-or-Die",
            description="Race for the right color or get caught—pick fast and survive.",
        ),
    ]
