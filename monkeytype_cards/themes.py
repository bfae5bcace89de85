"""Theme resolution: remote Monkeytype stylesheets parsed into a 4-color palette."""

from __future__ import annotations

import http.client
import re
import threading
import urllib.error
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Callable, Dict, Optional, Tuple
from urllib.parse import quote

from .logger import get_logger
from .monkeytype_base import THEME_TIMEOUT, THEME_URL_TEMPLATE, fetch_url

log = get_logger("themes")

COLOR_PATTERN = re.compile(r"--([a-z-]+)-color:\s*(#[0-9a-fA-F]{3,8})")


@dataclass(frozen=True)
class Theme:
    name: str
    bg_color: str
    main_color: str
    sub_color: str
    text_color: str


DEFAULT_THEME = Theme("dark", "#2c2e31", "#e2b714", "#646669", "#d1d0c5")

# css variable key -> Theme field
COLOR_FIELDS = {
    "bg": "bg_color",
    "main": "main_color",
    "sub": "sub_color",
    "text": "text_color",
}


def normalize_theme_name(name: str) -> str:
    return name.replace(" ", "_")


def parse_theme_css(name: str, css: str) -> Theme:
    """Build a Theme from stylesheet text. Missing or unknown keys keep the default colors."""
    colors = {}
    for key, value in COLOR_PATTERN.findall(css):
        field = COLOR_FIELDS.get(key)
        if field:
            colors[field] = value
    return replace(DEFAULT_THEME, name=name, **colors)


class ReadWriteLock:
    """Many concurrent readers, one exclusive writer."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self):
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            while self._writing or self._readers:
                self._cond.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


class ThemeCache:
    """In-memory theme store that lives as long as its owner (no eviction)."""

    def __init__(self):
        self._themes: Dict[str, Theme] = {}
        self._lock = ReadWriteLock()

    def get(self, name: str) -> Optional[Theme]:
        with self._lock.read():
            return self._themes.get(name)

    def set(self, name: str, theme: Theme) -> None:
        with self._lock.write():
            self._themes[name] = theme

    def __contains__(self, name: str) -> bool:
        with self._lock.read():
            return name in self._themes

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._themes)


class ThemeResolver:
    def __init__(
        self,
        cache: Optional[ThemeCache] = None,
        fetch: Callable[[str, float], Tuple[int, bytes]] = fetch_url,
        timeout: float = THEME_TIMEOUT,
    ):
        self.cache = cache if cache is not None else ThemeCache()
        self._fetch = fetch
        self.timeout = timeout

    def resolve(self, theme_name: str) -> Theme:
        """Return the palette for ``theme_name``. Never raises; failures fall back to DEFAULT_THEME."""
        name = normalize_theme_name(theme_name)

        cached = self.cache.get(name)
        if cached is not None:
            return cached

        # The lock is not held here, so two requests may fetch the same theme.
        url = THEME_URL_TEMPLATE.format(name=quote(name, safe=""))
        try:
            status, body = self._fetch(url, self.timeout)
        except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as e:
            log.warning("theme %r unavailable (%s), using default", name, e)
            return DEFAULT_THEME
        if status != 200:
            log.warning("theme %r returned HTTP %s, using default", name, status)
            return DEFAULT_THEME

        theme = parse_theme_css(name, body.decode("utf-8", errors="ignore"))
        self.cache.set(name, theme)
        log.debug("cached theme %r", name)
        return theme
