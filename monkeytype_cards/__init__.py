"""Monkeytype personal-best stat cards rendered as SVG."""

from .card import CardParams, CardResult, StatsCardService
from .render import render_card
from .stats import NoDataError, StatsError, StatsFetcher
from .themes import DEFAULT_THEME, Theme, ThemeCache, ThemeResolver

__all__ = [
    "CardParams",
    "CardResult",
    "StatsCardService",
    "render_card",
    "NoDataError",
    "StatsError",
    "StatsFetcher",
    "DEFAULT_THEME",
    "Theme",
    "ThemeCache",
    "ThemeResolver",
]
