# monkeytype_base.py

import os
import urllib.request

# --- SHARED CONFIG ---
API_BASE = os.environ.get("MONKEYTYPE_API_BASE", "https://api.monkeytype.com").rstrip("/")
THEME_BASE = os.environ.get(
    "MONKEYTYPE_THEME_BASE",
    "https://raw.githubusercontent.com/monkeytypegame/monkeytype/master/frontend/static/themes",
).rstrip("/")

PROFILE_URL_TEMPLATE = API_BASE + "/users/{username}/profile"
THEME_URL_TEMPLATE = THEME_BASE + "/{name}.css"

# Seconds, per outbound request
THEME_TIMEOUT = float(os.environ.get("THEME_TIMEOUT", "2"))
STATS_TIMEOUT = float(os.environ.get("STATS_TIMEOUT", "3"))
CLI_TIMEOUT = 5.0

HEADERS = {"User-Agent": "Monkeytype-Stats-Card", "Accept": "*/*"}


# --- UTILITIES ---
def escape_xml(text):
    """Sanitize text for SVG output."""
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace('"', "&quot;")


def fetch_url(url, timeout):
    """Shared HTTP GET. Returns (status, body_bytes); HTTP error statuses raise urllib.error.HTTPError."""
    req = urllib.request.Request(url, headers=HEADERS)
    with urllib.request.urlopen(req, timeout=timeout) as resp:
        return resp.status, resp.read()
