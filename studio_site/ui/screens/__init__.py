"""Screen components for the TUI application."""

from .base import BaseScreen
from .site import SiteScreen, footer_text, social_link_text

__all__ = [
    "BaseScreen",
    "SiteScreen",
    "footer_text",
    "social_link_text",
]
