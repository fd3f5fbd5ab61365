"""
Font file I/O utilities: discovery, reading, writing and size metadata.
"""

import hashlib
from collections.abc import Iterator
from pathlib import Path

from persian_fontkit.config.weights import INPUT_EXTENSIONS
from persian_fontkit.core.errors import FileOperationError
from persian_fontkit.core.models import FontFileDescriptor

SIZE_UNITS = ("B", "KB", "MB", "GB")


def iter_fonts(directory: Path, pattern: str = "*") -> Iterator[Path]:
    """
    Iterate over font files matching pattern, sorted by name.

    Only regular files with a supported font extension are yielded.

    Args:
        directory: Directory to search
        pattern: Glob pattern to match

    Yields:
        Paths to matching font files
    """
    fonts = sorted(
        path
        for path in Path(directory).glob(pattern)
        if path.is_file() and path.suffix.lower() in INPUT_EXTENSIONS
    )
    return iter(fonts)


def read_file_buffer(path: str | Path) -> bytes:
    """Read a font file into memory."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FileOperationError(
            f"Failed to read {path}: {e}", str(path), "read", e
        ) from e


def write_file_buffer(path: str | Path, data: bytes) -> Path:
    """Write bytes to path, creating parent directories."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        raise FileOperationError(
            f"Failed to write {path}: {e}", str(path), "write", e
        ) from e
    return path


def format_file_size(size: int) -> str:
    """
    Format a byte count for humans.

    Uses binary units with at most two decimals and no trailing zeros,
    e.g. 0 -> "0 B", 1536 -> "1.5 KB", 2400000 -> "2.29 MB".
    """
    if size <= 0:
        return "0 B"
    value = float(size)
    index = 0
    while value >= 1024 and index < len(SIZE_UNITS) - 1:
        value /= 1024
        index += 1
    return f"{round(value, 2):g} {SIZE_UNITS[index]}"


def describe_font(path: str | Path) -> FontFileDescriptor:
    """Stat a font file and capture its descriptor under the name it was given."""
    path = Path(path).absolute()
    size = path.stat().st_size
    return FontFileDescriptor(
        path=str(path),
        name=path.name,
        extension=path.suffix,
        size=size,
        size_formatted=format_file_size(size),
    )


def describe_with_size(path: str | Path, size: int) -> FontFileDescriptor:
    """Build a descriptor from a known byte count without re-reading the file."""
    path = Path(path)
    return FontFileDescriptor(
        path=str(path),
        name=path.name,
        extension=path.suffix,
        size=size,
        size_formatted=format_file_size(size),
    )


def md5_bytes(data: bytes) -> str:
    """Hex MD5 digest of data."""
    return hashlib.md5(data).hexdigest()


def md5_file(path: str | Path) -> str:
    """Hex MD5 digest of a file's contents."""
    digest = hashlib.md5()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(1 << 16), b""):
            digest.update(chunk)
    return digest.hexdigest()


def content_hash(data: bytes, length: int = 8) -> str:
    """Short content hash used for cache-busting filenames."""
    return md5_bytes(data)[:length]


def calculate_reduction(original: int, optimized: int) -> str:
    """
    Size reduction percentage with one decimal.

    Returns "0.0" when the original size is zero.
    """
    if original <= 0:
        return "0.0"
    return f"{(1 - optimized / original) * 100:.1f}"
