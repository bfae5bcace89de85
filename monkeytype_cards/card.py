# card.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .logger import get_logger
from .render import render_card
from .stats import StatsError, StatsFetcher
from .themes import Theme, ThemeResolver

log = get_logger("card")

DEFAULT_USERNAME = "Guest"
DEFAULT_THEME_NAME = "dark"
DEFAULT_MODE = "time"
DEFAULT_LENGTH = "60"


@dataclass(frozen=True)
class CardParams:
    username: str = DEFAULT_USERNAME
    theme: str = DEFAULT_THEME_NAME
    mode: str = DEFAULT_MODE
    length: str = DEFAULT_LENGTH
    transparent: bool = False

    @property
    def mode_label(self) -> str:
        return f"{self.mode} {self.length}"


@dataclass(frozen=True)
class CardResult:
    svg: str
    theme: Theme
    wpm: float
    accuracy: float
    # Stats failure that was replaced by zeros, kept for diagnostics only
    error: Optional[StatsError] = None


class StatsCardService:
    """Shared pipeline: resolve theme, fetch the personal best, render."""

    def __init__(self, resolver: Optional[ThemeResolver] = None, fetcher: Optional[StatsFetcher] = None):
        self.resolver = resolver or ThemeResolver()
        self.fetcher = fetcher or StatsFetcher()

    def build(self, params: CardParams) -> CardResult:
        theme = self.resolver.resolve(params.theme)

        error = None
        try:
            wpm, accuracy = self.fetcher.fetch(params.username, params.mode, params.length)
        except StatsError as e:
            # The card is always rendered; missing stats show as zeros
            log.debug("stats unavailable for %r (%s): %s", params.username, params.mode_label, e)
            wpm, accuracy, error = 0.0, 0.0, e

        svg = render_card(theme, params.username, params.mode_label, wpm, accuracy, params.transparent)
        return CardResult(svg, theme, wpm, accuracy, error)
