"""Yanns Studios site: the studio's one-page site rendered in the terminal."""

__version__ = "0.1.0"
