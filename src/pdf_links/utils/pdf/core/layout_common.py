"""
Layout and style constants for the text pages drawn by the renderer.
"""

# Page geometry (A4, points)
PAGE_W, PAGE_H = 595, 842

# Text block
MARGIN_X = 56
MARGIN_TOP = 64
BODY_FONT = "/F1"
BODY_SIZE = 11
HEADING_FONT = "/F2"
HEADING_SIZE = 16
LEADING = 15

# Underline drawn beneath link regions
LINK_UNDERLINE_WIDTH = 0.6

# Colors (RGB components in 0-1 space encoded as strings for PDF ops)
COLORS = {
    "text": "0 0 0",
    "link": "0.10 0.30 0.80",
}


def color(name: str) -> str:
    return COLORS.get(name, "0 0 0")
