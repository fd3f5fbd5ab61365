"""
Request validation and shallow font signature checks.
"""

from pathlib import Path

from persian_fontkit.config.subsets import SUBSET_CONFIGS
from persian_fontkit.config.weights import (
    FONT_DISPLAYS,
    FONT_STYLES,
    INPUT_EXTENSIONS,
    MAX_WEIGHT,
    MIN_WEIGHT,
    OUTPUT_FORMATS,
)
from persian_fontkit.core.errors import (
    InvalidFontError,
    UnsupportedFormatError,
    ValidationError,
)
from persian_fontkit.core.font_io import format_file_size
from persian_fontkit.core.models import OptimizationRequest
from persian_fontkit.utils.logging import logger

# Maximum recommended font file size (10MB)
MAX_RECOMMENDED_SIZE = 10 * 1024 * 1024

# Leading bytes accepted for each input extension
FONT_SIGNATURES: dict[str, tuple[bytes, ...]] = {
    ".ttf": (b"\x00\x01\x00\x00", b"true"),
    ".otf": (b"OTTO",),
    ".woff": (b"wOFF",),
    ".woff2": (b"wOF2",),
}


def _require_path(value, field: str) -> Path:
    if not value:
        raise ValidationError(f"{field} is required", field, value)
    if not isinstance(value, (str, Path)):
        raise ValidationError(f"{field} must be a path", field, value)
    return Path(value)


def validate_request(request: OptimizationRequest) -> None:
    """
    Validate an optimization request before any work is done.

    Raises:
        ValidationError: Missing path or out-of-range field
        UnsupportedFormatError: Unsupported input extension or output format
        InvalidFontError: Input file is empty
    """
    input_path = _require_path(request.input_path, "input_path")

    if not input_path.exists():
        raise ValidationError(
            f"Font file not found: {input_path}", "input_path", request.input_path
        )

    extension = input_path.suffix.lower()
    if extension not in INPUT_EXTENSIONS:
        raise UnsupportedFormatError(
            f"Unsupported font format: {extension or '(none)'}",
            extension,
            INPUT_EXTENSIONS,
        )

    if not input_path.is_file():
        raise ValidationError(
            f"Input path is not a file: {input_path}", "input_path", request.input_path
        )

    size = input_path.stat().st_size
    if size == 0:
        raise InvalidFontError(
            f"Font file is empty: {input_path}", str(input_path), "File size is 0 bytes"
        )
    if size > MAX_RECOMMENDED_SIZE:
        logger.warning(
            f"Large font file detected ({format_file_size(size)}). "
            "This may take a while to optimize."
        )

    _require_path(request.output_dir, "output_dir")

    if request.format not in OUTPUT_FORMATS:
        raise UnsupportedFormatError(
            f"Unsupported output format: {request.format}",
            str(request.format),
            OUTPUT_FORMATS,
        )

    weight = request.font_weight
    if weight is not None and (
        isinstance(weight, bool)
        or not isinstance(weight, int)
        or not MIN_WEIGHT <= weight <= MAX_WEIGHT
    ):
        raise ValidationError(
            f"Font weight must be between {int(MIN_WEIGHT)} and "
            f"{int(MAX_WEIGHT)}, got: {weight}",
            "font_weight",
            weight,
        )

    if request.font_style is not None and request.font_style not in FONT_STYLES:
        raise ValidationError(
            f'Font style must be "normal" or "italic", got: {request.font_style}',
            "font_style",
            request.font_style,
        )

    if request.font_display not in FONT_DISPLAYS:
        raise ValidationError(
            f"Font display must be one of: {', '.join(FONT_DISPLAYS)}",
            "font_display",
            request.font_display,
        )

    validate_subsets(request.subsets)


def validate_subsets(subsets) -> None:
    """Subsets must be a non-empty list of built-in subset names."""
    if not isinstance(subsets, (list, tuple)):
        raise ValidationError("Subsets must be a list", "subsets", subsets)
    if not subsets:
        raise ValidationError("At least one subset is required", "subsets", subsets)
    unknown = [
        name
        for name in subsets
        if not isinstance(name, str) or name not in SUBSET_CONFIGS
    ]
    if unknown:
        raise ValidationError(
            f"Unknown subsets: {', '.join(map(str, unknown))} "
            f"(available: {', '.join(SUBSET_CONFIGS)})",
            "subsets",
            subsets,
        )


def validate_font_file(path: str | Path) -> None:
    """
    Check the leading bytes of a font file against its extension.

    Raises:
        InvalidFontError: Empty file or signature mismatch
    """
    path = Path(path)
    with open(path, "rb") as f:
        header = f.read(4)

    if not header:
        raise InvalidFontError(
            f"Font file is empty: {path}", str(path), "File size is 0 bytes"
        )

    extension = path.suffix.lower()
    signatures = FONT_SIGNATURES.get(extension)
    if signatures and not any(header == signature for signature in signatures):
        expected = " or ".join(repr(s) for s in signatures)
        raise InvalidFontError(
            f"Invalid {extension.lstrip('.').upper()} file signature: {path}",
            str(path),
            f"File does not start with expected header {expected}",
        )


def validate_directory(path: str | Path) -> None:
    """An existing path must be a directory; a missing one is fine."""
    directory = _require_path(path, "directory")
    if directory.exists() and not directory.is_dir():
        raise ValidationError(
            f"Path exists but is not a directory: {directory}", "directory", path
        )
