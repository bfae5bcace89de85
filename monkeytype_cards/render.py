# render.py

from .monkeytype_base import escape_xml

CARD_WIDTH = 400
CARD_HEIGHT = 150

SVG_TEMPLATE = """<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" fill="none" xmlns="http://www.w3.org/2000/svg">
    <style>
        .header {{ font: 800 20px 'Segoe UI', Ubuntu, Sans-Serif; fill: {main}; }}
        .stat-label {{ font: 600 14px 'Segoe UI', Ubuntu, Sans-Serif; fill: {sub}; }}
        .stat-value {{ font: 700 28px 'Segoe UI', Ubuntu, Sans-Serif; fill: {main}; }}
        .bg {{ fill: {bg}; rx: 10px; }}
        .sub-info {{ font: 600 12px 'Segoe UI', Ubuntu, Sans-Serif; fill: {text}; opacity: 0.9; }}
    </style>
    <rect width="{width}" height="{height}" class="bg"/>
    <text x="25" y="35" class="header">Monkeytype Stats</text>
    <text x="375" y="35" text-anchor="end" class="sub-info">@{username} ({mode_label})</text>
    <text x="25" y="80" class="stat-label">Highest WPM</text>
    <text x="180" y="80" class="stat-value">{wpm:.0f}</text>
    <text x="25" y="115" class="stat-label">Accuracy</text>
    <text x="180" y="115" class="stat-value">{accuracy:.2f}%</text>
</svg>"""


def render_card(theme, username, mode_label, wpm, accuracy, transparent=False):
    """Fill the fixed 400x150 card template. ``transparent`` drops the background fill."""
    return SVG_TEMPLATE.format(
        width=CARD_WIDTH,
        height=CARD_HEIGHT,
        main=theme.main_color,
        sub=theme.sub_color,
        bg="none" if transparent else theme.bg_color,
        text=theme.text_color,
        username=escape_xml(username),
        mode_label=escape_xml(mode_label),
        wpm=float(wpm),
        accuracy=float(accuracy),
    )
