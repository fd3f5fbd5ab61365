"""
Filename-based naming utilities.

Infers family, weight and style from font filenames and builds output names.
"""

from dataclasses import dataclass
from pathlib import Path

from persian_fontkit.config.weights import ITALIC_KEYWORDS, WEIGHT_KEYWORDS, Weight


def parse_font_weight(filename: str | Path) -> int:
    """
    Infer a CSS weight from a filename.

    Matches keywords case-insensitively by substring in WEIGHT_KEYWORDS order.
    Examples: vazir-bold.ttf -> 700, iransans-light.ttf -> 300.
    """
    lower = Path(filename).name.lower()
    for keyword, weight in WEIGHT_KEYWORDS:
        if keyword in lower:
            return int(weight)
    return int(Weight.REGULAR)


def parse_font_style(filename: str | Path) -> str:
    """Infer "italic" or "normal" from a filename."""
    lower = Path(filename).name.lower()
    if any(keyword in lower for keyword in ITALIC_KEYWORDS):
        return "italic"
    return "normal"


def parse_font_family(filename: str | Path) -> str:
    """Default family name: the filename without its extension."""
    return Path(filename).stem


@dataclass
class FontNaming:
    """Resolved naming for one optimized font."""

    family: str  # e.g., "Vazir"
    weight: int  # e.g., 700
    style: str = "normal"  # "normal" or "italic"

    @classmethod
    def from_filename(
        cls,
        filename: str | Path,
        family: str | None = None,
        weight: int | None = None,
        style: str | None = None,
    ) -> "FontNaming":
        """Fill unset fields from the filename."""
        return cls(
            family=family or parse_font_family(filename),
            weight=weight if weight is not None else parse_font_weight(filename),
            style=style or parse_font_style(filename),
        )


def optimized_filename(
    original_name: str | Path, extension: str, content_hash: str | None = None
) -> str:
    """
    Output filename for an optimized font.

    Args:
        original_name: Input filename (its stem is kept)
        extension: Target extension without dot (e.g. "woff2")
        content_hash: Hash spliced between stem and extension, if any

    Returns:
        e.g. "vazir-bold-1a2b3c4d.woff2" or "vazir-bold.woff2"
    """
    stem = Path(original_name).stem
    if content_hash:
        return f"{stem}-{content_hash}.{extension}"
    return f"{stem}.{extension}"
