"""Personal-best lookup against the public Monkeytype profile API."""

from __future__ import annotations

import http.client
import json
import urllib.error
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple
from urllib.parse import quote

from .logger import get_logger
from .monkeytype_base import PROFILE_URL_TEMPLATE, STATS_TIMEOUT, fetch_url

log = get_logger("stats")


class StatsError(Exception):
    """Base class for every way a stats lookup can fail."""


class StatsTransportError(StatsError):
    pass


class StatsDecodeError(StatsError):
    pass


class NoDataError(StatsError):
    def __init__(self, message="no data"):
        super().__init__(message)


@dataclass(frozen=True)
class Record:
    wpm: float
    acc: float

    @classmethod
    def from_payload(cls, raw) -> "Record":
        if not isinstance(raw, dict):
            raise StatsDecodeError(f"personal best entry is not an object: {raw!r}")
        try:
            return cls(float(raw.get("wpm") or 0), float(raw.get("acc") or 0))
        except (TypeError, ValueError, OverflowError) as e:
            raise StatsDecodeError(f"bad personal best entry: {raw!r}") from e


def _decode_bests(raw) -> Dict[str, List[Record]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise StatsDecodeError("personal bests must be an object keyed by length")
    bests = {}
    for length, entries in raw.items():
        if entries is None:
            entries = []
        if not isinstance(entries, list):
            raise StatsDecodeError(f"personal bests for {length!r} must be a list")
        bests[str(length)] = [Record.from_payload(e) for e in entries]
    return bests


@dataclass
class Profile:
    name: str = ""
    time: Dict[str, List[Record]] = field(default_factory=dict)
    words: Dict[str, List[Record]] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload) -> "Profile":
        """Decode the ``{"data": {"name", "personalBests": {"time", "words"}}}`` document."""
        if not isinstance(payload, dict):
            raise StatsDecodeError("profile document is not an object")
        data = payload.get("data") or {}
        if not isinstance(data, dict):
            raise StatsDecodeError("profile 'data' is not an object")
        bests = data.get("personalBests") or {}
        if not isinstance(bests, dict):
            raise StatsDecodeError("profile 'personalBests' is not an object")
        return cls(
            name=str(data.get("name") or ""),
            time=_decode_bests(bests.get("time")),
            words=_decode_bests(bests.get("words")),
        )

    def records_for(self, mode: str, length: str) -> List[Record]:
        if mode == "time":
            return self.time.get(length, [])
        if mode == "words":
            return self.words.get(length, [])
        return []


class StatsFetcher:
    def __init__(
        self,
        fetch: Callable[[str, float], Tuple[int, bytes]] = fetch_url,
        timeout: float = STATS_TIMEOUT,
    ):
        self._fetch = fetch
        self.timeout = timeout

    def fetch_profile(self, username: str) -> Profile:
        url = PROFILE_URL_TEMPLATE.format(username=quote(username, safe=""))
        try:
            _, body = self._fetch(url, self.timeout)
        except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as e:
            raise StatsTransportError(f"profile request for {username!r} failed: {e}") from e

        try:
            payload = json.loads(body)
        except (TypeError, ValueError) as e:
            raise StatsDecodeError(f"profile for {username!r} is not valid JSON") from e
        return Profile.from_payload(payload)

    def fetch(self, username: str, mode: str, length: str) -> Tuple[float, float]:
        """Return (wpm, accuracy) of the first personal best for mode/length.

        The upstream list is assumed to be sorted best-first; it is not re-checked.
        Raises a StatsError subclass on any failure.
        """
        records = self.fetch_profile(username).records_for(mode, length)
        if not records:
            raise NoDataError()
        best = records[0]
        log.debug("%s %s %s -> %.2f wpm, %.2f%%", username, mode, length, best.wpm, best.acc)
        return best.wpm, best.acc
