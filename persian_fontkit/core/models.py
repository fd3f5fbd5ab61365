"""
Data types shared by the pipeline and the result cache.
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from persian_fontkit.config.paths import DEFAULT_CACHE_DIR
from persian_fontkit.config.subsets import DEFAULT_SUBSETS


@dataclass(frozen=True)
class FontFileDescriptor:
    """Snapshot of a font file on disk."""

    path: str  # absolute
    name: str  # e.g., "vazir-bold.ttf"
    extension: str  # e.g., ".ttf"
    size: int
    size_formatted: str  # e.g., "2.29 MB"


@dataclass(frozen=True)
class OptimizationRequest:
    """
    Configuration for optimizing one font file.

    font_family, font_weight and font_style are inferred from the input
    filename when left as None.
    """

    input_path: str | Path
    output_dir: str | Path
    font_family: str | None = None
    font_weight: int | None = None
    font_style: str | None = None
    subsets: tuple[str, ...] | list[str] = DEFAULT_SUBSETS
    format: str = "woff2"
    font_display: str = "swap"
    use_hash: bool = True
    cache: bool = True
    cache_dir: str | Path = DEFAULT_CACHE_DIR


@dataclass(frozen=True)
class OptimizationResult:
    """Outcome of a successful optimization, as stored by the cache."""

    original: FontFileDescriptor
    optimized: FontFileDescriptor
    reduction: str  # percentage with one decimal, e.g. "75.8"
    css: str
    font_family: str
    font_weight: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
