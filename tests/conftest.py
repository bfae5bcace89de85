import os
import sys
import urllib.error

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


class FakeBackend:
    """Stands in for fetch_url(): maps URL substrings to (status, body) or an exception."""

    def __init__(self, routes=None):
        self.routes = routes or {}
        self.calls = []

    def __call__(self, url, timeout):
        self.calls.append(url)
        for fragment, response in self.routes.items():
            if fragment in url:
                if isinstance(response, Exception):
                    raise response
                status, body = response
                return status, body.encode() if isinstance(body, str) else body
        raise urllib.error.URLError("unreachable")


@pytest.fixture
def backend():
    return FakeBackend()
