"""
Default subsetting engine backed by fontTools.

The pipeline treats the engine as a black box: any callable with the
SubsetEngine signature can be passed in its place.
"""

from collections.abc import Callable, Iterable
from io import BytesIO

from fontTools.subset import Options, Subsetter, load_font, save_font

SubsetEngine = Callable[[bytes, Iterable[int], str], bytes]

# Output format to fontTools flavor (None writes plain sfnt)
FLAVORS: dict[str, str | None] = {
    "woff2": "woff2",
    "woff": "woff",
    "ttf": None,
}


def build_options(target_format: str) -> Options:
    """Subsetter options for web output, keeping shaping data for Arabic script."""
    if target_format not in FLAVORS:
        raise ValueError(f"Unsupported target format: {target_format}")
    options = Options()
    options.flavor = FLAVORS[target_format]
    options.layout_features = ["*"]  # Persian shaping needs init/medi/fina/rlig
    options.layout_scripts = ["*"]
    options.name_IDs = ["*"]
    options.name_languages = ["*"]
    options.notdef_outline = True
    options.recommended_glyphs = True
    return options


def subset_font(buffer: bytes, characters: Iterable[int], target_format: str) -> bytes:
    """
    Subset a font to the given code points.

    Args:
        buffer: Font file contents (TTF, OTF, WOFF or WOFF2)
        characters: Unicode code points to keep
        target_format: "woff2", "woff" or "ttf"

    Returns:
        Subsetted font bytes in the target container format
    """
    options = build_options(target_format)
    font = load_font(BytesIO(buffer), options, dontLoadGlyphNames=True)
    try:
        subsetter = Subsetter(options=options)
        subsetter.populate(unicodes=list(characters))
        subsetter.subset(font)
        output = BytesIO()
        save_font(font, output, options)
    finally:
        font.close()
    return output.getvalue()
