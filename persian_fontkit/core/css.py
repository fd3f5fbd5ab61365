"""
CSS generation for optimized fonts.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import PurePosixPath

from persian_fontkit.config.weights import CSS_FORMAT_NAMES, MIME_TYPES


def get_font_format(path: str) -> str:
    """CSS format() hint for a font path, based on its extension."""
    extension = PurePosixPath(path).suffix.lstrip(".").lower()
    return CSS_FORMAT_NAMES.get(extension, extension)


def get_font_mime_type(path: str) -> str:
    """MIME type for a font path, based on its extension."""
    extension = PurePosixPath(path).suffix.lstrip(".").lower()
    return MIME_TYPES.get(extension, "application/octet-stream")


@dataclass(frozen=True)
class FontFace:
    """Inputs for one @font-face rule."""

    font_family: str
    font_path: str  # URL as written into src, e.g. "./vazir-bold.woff2"
    font_weight: int = 400
    font_style: str = "normal"
    font_display: str = "swap"
    unicode_range: str | None = None


def generate_font_face(face: FontFace) -> str:
    """Render a single @font-face rule."""
    lines = [
        "@font-face {",
        f"  font-family: '{face.font_family}';",
        f"  src: url('{face.font_path}') format('{get_font_format(face.font_path)}');",
        f"  font-weight: {face.font_weight};",
        f"  font-style: {face.font_style};",
        f"  font-display: {face.font_display};",
    ]
    if face.unicode_range:
        lines.append(f"  unicode-range: {face.unicode_range};")
    lines.append("}")
    return "\n".join(lines) + "\n"


def generate_comment_block(comments: Iterable[str]) -> str:
    """Render a /** ... */ header comment."""
    lines = ["/**"]
    lines.extend(f" * {comment}" for comment in comments)
    lines.append(" */")
    return "\n".join(lines) + "\n"


def generate_css_file(fragments: Iterable[str], comments: Iterable[str] = ()) -> str:
    """
    Assemble a stylesheet from pre-rendered @font-face fragments.

    Args:
        fragments: Rendered rules, one per font
        comments: Lines for the header comment

    Returns:
        Stylesheet text ending with a newline
    """
    header = generate_comment_block(
        ["Optimized fonts generated by persian-fontkit", *comments]
    )
    body = "\n".join(fragment.rstrip("\n") + "\n" for fragment in fragments)
    return f"{header}\n{body}" if body else header


def generate_preload_tag(font_path: str) -> str:
    """HTML preload link for a font URL."""
    return (
        f'<link rel="preload" href="{font_path}" as="font" '
        f'type="{get_font_mime_type(font_path)}" crossorigin="anonymous">'
    )


def generate_preload_tags(font_paths: Iterable[str]) -> str:
    """Preload links, one per line."""
    return "\n".join(generate_preload_tag(path) for path in font_paths)
