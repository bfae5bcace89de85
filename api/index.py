# api/index.py

from http.server import BaseHTTPRequestHandler

from monkeytype_cards.card import StatsCardService
from monkeytype_cards.handler import respond_with_card
from monkeytype_cards.logger import configure_logging

configure_logging()

# Lives as long as the warm function instance, so the theme cache does too
SERVICE = StatsCardService()


class handler(BaseHTTPRequestHandler):
    def do_GET(self):
        respond_with_card(self, SERVICE)
