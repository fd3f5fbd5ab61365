"""
Weight, style and format definitions.
"""

from enum import IntEnum


class Weight(IntEnum):
    """CSS font-weight values."""

    THIN = 100
    EXTRALIGHT = 200
    LIGHT = 300
    REGULAR = 400
    MEDIUM = 500
    SEMIBOLD = 600
    BOLD = 700
    EXTRABOLD = 800
    BLACK = 900


MIN_WEIGHT = Weight.THIN
MAX_WEIGHT = Weight.BLACK

# Filename keyword to weight, checked in order; the first substring match wins.
# Compound names must come before their suffixes ("extralight" before "light").
WEIGHT_KEYWORDS: list[tuple[str, Weight]] = [
    ("thin", Weight.THIN),
    ("extralight", Weight.EXTRALIGHT),
    ("ultralight", Weight.EXTRALIGHT),
    ("light", Weight.LIGHT),
    ("regular", Weight.REGULAR),
    ("normal", Weight.REGULAR),
    ("medium", Weight.MEDIUM),
    ("semibold", Weight.SEMIBOLD),
    ("demibold", Weight.SEMIBOLD),
    ("extrabold", Weight.EXTRABOLD),
    ("ultrabold", Weight.EXTRABOLD),
    ("bold", Weight.BOLD),
    ("black", Weight.BLACK),
    ("heavy", Weight.BLACK),
]

ITALIC_KEYWORDS = ("italic", "oblique")

FONT_STYLES = ("normal", "italic")
FONT_DISPLAYS = ("auto", "block", "swap", "fallback", "optional")

# Output container formats and their CSS format() hints
OUTPUT_FORMATS = ("woff2", "woff", "ttf")
CSS_FORMAT_NAMES = {
    "woff2": "woff2",
    "woff": "woff",
    "ttf": "truetype",
    "otf": "opentype",
}
MIME_TYPES = {
    "woff2": "font/woff2",
    "woff": "font/woff",
    "ttf": "font/ttf",
    "otf": "font/otf",
}

# Input file extensions accepted by the optimizer
INPUT_EXTENSIONS = (".ttf", ".otf", ".woff", ".woff2")
