"""Shared pytest fixtures."""

import pytest

from persian_fontkit.cache.store import FontCache

TTF_SIGNATURE = b"\x00\x01\x00\x00"
WOFF2_SIGNATURE = b"wOF2"


class FakeEngine:
    """Subsetting engine stand-in that records its calls."""

    def __init__(self, output_size=1024, signature=WOFF2_SIGNATURE, error=None):
        self.output_size = output_size
        self.signature = signature
        self.error = error
        self.calls = []

    def __call__(self, buffer, characters, target_format):
        self.calls.append((len(buffer), len(characters), target_format))
        if self.error is not None:
            raise self.error
        if self.output_size == 0:
            return b""
        return self.signature + bytes(self.output_size - len(self.signature))


@pytest.fixture
def temp_font_dir(tmp_path):
    """Create a temporary directory for font testing."""
    path = tmp_path / "fonts"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "out"


@pytest.fixture
def font_cache(tmp_path):
    return FontCache(tmp_path / "cache")


@pytest.fixture
def make_font(temp_font_dir):
    """Factory writing a file with a valid TTF signature padded to size bytes."""

    def _make(name="vazir-regular.ttf", size=4096, signature=TTF_SIGNATURE):
        path = temp_font_dir / name
        if size == 0:
            path.write_bytes(b"")
        else:
            path.write_bytes(signature + bytes(size - len(signature)))
        return path

    return _make


@pytest.fixture
def make_engine():
    return FakeEngine


# Persian letters plus CJK ideographs that no built-in subset keeps
PERSIAN_SAMPLE = [ord(c) for c in "ابپتثجچحخدذرزژسشصضطظعغفقکگلمنوهی"]
LATIN_SAMPLE = list(range(0x41, 0x5B))
CJK_SAMPLE = list(range(0x4E00, 0x4E80))


def _box_glyph():
    from fontTools.pens.ttGlyphPen import TTGlyphPen

    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((100, 700))
    pen.lineTo((500, 700))
    pen.lineTo((500, 0))
    pen.closePath()
    return pen.glyph()


def build_test_font(path, codepoints, family="Test Sans", style="Regular"):
    """Write a minimal TrueType font mapping each code point to a box glyph."""
    from fontTools.fontBuilder import FontBuilder

    cmap = {cp: f"uni{cp:04X}" for cp in codepoints}
    glyph_order = [".notdef", *cmap.values()]

    builder = FontBuilder(1000, isTTF=True)
    builder.setupGlyphOrder(glyph_order)
    builder.setupCharacterMap(cmap)
    builder.setupGlyf({name: _box_glyph() for name in glyph_order})
    builder.setupHorizontalMetrics({name: (600, 100) for name in glyph_order})
    builder.setupHorizontalHeader(ascent=800, descent=-200)
    builder.setupNameTable({"familyName": family, "styleName": style})
    builder.setupOS2(
        sTypoAscender=800, sTypoDescender=-200, usWinAscent=800, usWinDescent=200
    )
    builder.setupPost()
    builder.save(str(path))
    return path


@pytest.fixture
def make_real_font(temp_font_dir):
    """Factory for real TrueType fonts covering Persian, Latin and CJK glyphs."""

    def _make(name="vazir-regular.ttf", codepoints=None):
        if codepoints is None:
            codepoints = PERSIAN_SAMPLE + LATIN_SAMPLE + CJK_SAMPLE
        return build_test_font(temp_font_dir / name, codepoints)

    return _make
