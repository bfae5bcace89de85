# handler.py

from urllib.parse import parse_qs, urlparse

from .card import CardParams, DEFAULT_LENGTH, DEFAULT_MODE, DEFAULT_THEME_NAME, DEFAULT_USERNAME


def params_from_query(query):
    """Map parse_qs() output onto CardParams; blank values count as missing."""
    def first(key, default=""):
        return query.get(key, [default])[0] or default

    return CardParams(
        username=first("username") or first("user", DEFAULT_USERNAME),
        theme=first("theme", DEFAULT_THEME_NAME),
        mode=first("mode", DEFAULT_MODE),
        length=first("length", DEFAULT_LENGTH),
        transparent=first("transparent") == "true",
    )


def respond_with_card(handler, service):
    """Serve the card for a BaseHTTPRequestHandler. Always 200 so embeds never break."""
    query = parse_qs(urlparse(handler.path).query) if "?" in handler.path else {}
    result = service.build(params_from_query(query))
    handler.send_response(200)
    handler.send_header("Content-Type", "image/svg+xml")
    handler.send_header("Cache-Control", "no-cache, no-store, must-revalidate")
    handler.end_headers()
    handler.wfile.write(result.svg.encode())
