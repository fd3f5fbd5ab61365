"""
Unicode range definitions for the built-in character subsets.

Reference: https://www.unicode.org/charts/
Ranges use the CSS unicode-range notation (U+XXXX or U+XXXX-YYYY).
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass

UNICODE_RANGE_PATTERN = re.compile(r"U\+([0-9A-Fa-f]+)(?:-([0-9A-Fa-f]+))?")


@dataclass(frozen=True)
class SubsetConfig:
    """Named group of Unicode ranges."""

    name: str
    unicode_ranges: tuple[str, ...]
    description: str


FARSI = SubsetConfig(
    "farsi",
    (
        "U+0600-06FF",  # Arabic (includes Persian)
        "U+0750-077F",  # Arabic Supplement
        "U+FB50-FDFF",  # Arabic Presentation Forms-A
        "U+FE70-FEFF",  # Arabic Presentation Forms-B
        "U+200C-200E",  # ZWNJ, ZWJ, LRM
        "U+2010-2019",  # Dashes and quotes
        "U+00AB",  # Left-pointing double angle quotation mark
        "U+00BB",  # Right-pointing double angle quotation mark
    ),
    "Persian and Arabic characters",
)

LATIN = SubsetConfig(
    "latin",
    (
        "U+0020-007E",  # Basic Latin
        "U+00A0-00FF",  # Latin-1 Supplement
    ),
    "Basic Latin characters",
)

NUMBERS = SubsetConfig(
    "numbers",
    (
        "U+0030-0039",  # ASCII digits
        "U+06F0-06F9",  # Persian digits
        "U+0660-0669",  # Arabic-Indic digits
    ),
    "Latin and Persian numbers",
)

PUNCTUATION = SubsetConfig(
    "punctuation",
    (
        "U+0020-002F",  # Space and basic punctuation
        "U+003A-0040",  # Colon to @
        "U+005B-0060",  # Brackets and backtick
        "U+007B-007E",  # Braces and tilde
        "U+060C",  # Arabic comma
        "U+061B",  # Arabic semicolon
        "U+061F",  # Arabic question mark
    ),
    "Punctuation marks",
)

SUBSET_CONFIGS: dict[str, SubsetConfig] = {
    subset.name: subset for subset in (FARSI, LATIN, NUMBERS, PUNCTUATION)
}

DEFAULT_SUBSETS = ("farsi", "latin", "numbers", "punctuation")

# Popular Persian font families
PERSIAN_FONTS = [
    "Vazir",
    "IRANSans",
    "Shabnam",
    "Yekan",
    "Kalameh",
    "Samim",
    "Sahel",
    "Tanha",
    "Parastoo",
    "Gandom",
]


def parse_unicode_range(value: str) -> range:
    """Parse a single ``U+XXXX[-YYYY]`` range into code points."""
    match = UNICODE_RANGE_PATTERN.fullmatch(value.strip())
    if match is None:
        raise ValueError(f"Invalid unicode range: {value!r}")
    start = int(match.group(1), 16)
    end = int(match.group(2), 16) if match.group(2) else start
    return range(start, end + 1)


def get_subset_codepoints(subsets: Iterable[str]) -> list[int]:
    """
    Resolve subset names to a sorted list of unique code points.

    Unknown subset names contribute nothing; callers validate names upstream.

    Args:
        subsets: Subset names (e.g. "farsi", "latin")

    Returns:
        Sorted code points covered by the union of the subsets
    """
    codepoints: set[int] = set()
    for name in subsets:
        config = SUBSET_CONFIGS.get(name)
        if config is None:
            continue
        for unicode_range in config.unicode_ranges:
            codepoints.update(parse_unicode_range(unicode_range))
    return sorted(codepoints)


def get_unicode_ranges(subsets: Iterable[str]) -> str:
    """Comma-joined unicode-range value for the given subsets."""
    ranges: list[str] = []
    for name in subsets:
        config = SUBSET_CONFIGS.get(name)
        if config is not None:
            ranges.extend(config.unicode_ranges)
    return ", ".join(ranges)
