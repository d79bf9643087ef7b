"""Data models for the Yanns Studios site application."""

from .config import AppConfig
from .game import GameRecord
from .page import NavSection, PageContent, SectionKey, SocialLink

__all__ = [
    "AppConfig",
    "GameRecord",
    "NavSection",
    "PageContent",
    "SectionKey",
    "SocialLink",
]
