"""User interface components using Textual framework."""

from .app import StudioSiteApp
from .screens import BaseScreen, SiteScreen
from .text import format_page_text

__all__ = [
    "BaseScreen",
    "SiteScreen",
    "StudioSiteApp",
    "format_page_text",
]
