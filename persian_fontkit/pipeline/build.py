"""
Build-step integration.

Optimizes the font families listed in a build configuration:

    source_dir = "public/fonts"
    output_dir = "public/fonts/optimized"
    format = "woff2"

    [[fonts]]
    family = "Vazir"
    weights = [400, 700]
    subsets = ["farsi", "latin", "numbers"]
    src = "vazir/*.ttf"

Output filenames carry no content hash so that pages can reference them by a
fixed path.
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from persian_fontkit.cache.store import FontCache
from persian_fontkit.config.paths import (
    DEFAULT_CACHE_DIR,
    DEFAULT_CSS_NAME,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_SOURCE_DIR,
)
from persian_fontkit.config.subsets import DEFAULT_SUBSETS
from persian_fontkit.config.weights import OUTPUT_FORMATS
from persian_fontkit.core.errors import FileOperationError, ValidationError
from persian_fontkit.core.font_io import iter_fonts
from persian_fontkit.core.models import OptimizationResult
from persian_fontkit.core.naming import parse_font_weight
from persian_fontkit.core.subsetter import SubsetEngine, subset_font
from persian_fontkit.core.validation import validate_subsets
from persian_fontkit.pipeline.optimizer import generate_optimized_css, optimize_fonts
from persian_fontkit.utils.logging import logger

CONFIG_KEYS = {
    "fonts",
    "source_dir",
    "output_dir",
    "format",
    "css_name",
    "cache",
    "cache_dir",
    "verbose",
}


@dataclass(frozen=True)
class FontConfig:
    """One font family to optimize."""

    family: str
    weights: tuple[int, ...] | None = None  # None keeps every weight found
    subsets: tuple[str, ...] = DEFAULT_SUBSETS
    src: str | None = None  # glob relative to source_dir

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FontConfig":
        if not isinstance(data, dict):
            raise ValidationError(
                "Each font entry must be a table with a family", "fonts", data
            )
        family = data.get("family")
        if not family or not isinstance(family, str):
            raise ValidationError("Font family is required", "family", family)

        weights = data.get("weights")
        if weights is not None:
            if not isinstance(weights, list) or not all(
                isinstance(w, int) for w in weights
            ):
                raise ValidationError(
                    f"Weights for {family} must be a list of integers",
                    "weights",
                    weights,
                )
            weights = tuple(weights)

        subsets = data.get("subsets", list(DEFAULT_SUBSETS))
        validate_subsets(subsets)

        return cls(
            family=family,
            weights=weights,
            subsets=tuple(subsets),
            src=data.get("src"),
        )


@dataclass(frozen=True)
class FontsConfig:
    """Build configuration: families plus shared directories and format."""

    fonts: tuple[FontConfig, ...]
    source_dir: Path = DEFAULT_SOURCE_DIR
    output_dir: Path = DEFAULT_OUTPUT_DIR
    format: str = "woff2"
    css_name: str = DEFAULT_CSS_NAME
    cache: bool = True
    cache_dir: Path = DEFAULT_CACHE_DIR
    verbose: bool = False

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], base_dir: Path | None = None
    ) -> "FontsConfig":
        """
        Build a configuration from parsed TOML.

        Relative directories are resolved against base_dir (the config
        file's directory) when given.
        """
        fonts = data.get("fonts")
        if not isinstance(fonts, list) or not fonts:
            raise ValidationError("At least one font is required", "fonts", fonts)

        format = data.get("format", "woff2")
        if format not in OUTPUT_FORMATS:
            raise ValidationError(
                f"Format must be one of: {', '.join(OUTPUT_FORMATS)}",
                "format",
                format,
            )

        def resolve(key: str, default: Path) -> Path:
            path = Path(data.get(key, default))
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            return path

        unknown = sorted(set(data) - CONFIG_KEYS)
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

        return cls(
            fonts=tuple(FontConfig.from_dict(font) for font in fonts),
            source_dir=resolve("source_dir", DEFAULT_SOURCE_DIR),
            output_dir=resolve("output_dir", DEFAULT_OUTPUT_DIR),
            format=format,
            css_name=data.get("css_name", DEFAULT_CSS_NAME),
            cache=bool(data.get("cache", True)),
            cache_dir=resolve("cache_dir", DEFAULT_CACHE_DIR),
            verbose=bool(data.get("verbose", False)),
        )


def load_config(path: str | Path) -> FontsConfig:
    """
    Read a TOML build configuration.

    Raises:
        FileOperationError: Config file missing or unreadable
        ValidationError: Invalid TOML or config values
    """
    path = Path(path)
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise FileOperationError(
            f"Failed to read config {path}: {e}", str(path), "read", e
        ) from e
    except tomllib.TOMLDecodeError as e:
        raise ValidationError(
            f"Invalid config {path}: {e}", "config", str(path)
        ) from e

    return FontsConfig.from_dict(data, base_dir=path.parent)


def find_family_fonts(font: FontConfig, source_dir: Path) -> list[Path]:
    """Files for a family: the src glob, else names containing the family."""
    if font.src:
        return list(iter_fonts(source_dir, font.src))
    family = font.family.lower()
    return [path for path in iter_fonts(source_dir) if family in path.name.lower()]


def optimize_fonts_for_build(
    config: FontsConfig,
    *,
    font_cache: FontCache | None = None,
    engine: SubsetEngine = subset_font,
) -> list[OptimizationResult]:
    """
    Optimize every configured family and write the stylesheet.

    Families without matching files are skipped with a warning.

    Returns:
        Results for all fonts that were optimized
    """
    if config.cache and font_cache is None:
        font_cache = FontCache(config.cache_dir)

    if config.verbose:
        logger.info(f"Optimizing Persian fonts from {config.source_dir}")

    results: list[OptimizationResult] = []
    for font in config.fonts:
        font_files = find_family_fonts(font, config.source_dir)
        if font.weights is not None:
            font_files = [
                path for path in font_files if parse_font_weight(path) in font.weights
            ]

        if not font_files:
            logger.warning(f"No files found for font: {font.family}")
            continue

        family_results = optimize_fonts(
            font_files,
            config.output_dir,
            font_cache=font_cache,
            engine=engine,
            font_family=font.family,
            subsets=font.subsets,
            format=config.format,
            use_hash=False,
            cache=config.cache,
            cache_dir=config.cache_dir,
        )
        if config.verbose:
            for result in family_results:
                logger.info(f"Optimized {result.font_family} ({result.font_weight})")
        results.extend(family_results)

    if results:
        css_path = config.output_dir / config.css_name
        generate_optimized_css(results, css_path)
        logger.info(f"Wrote {css_path}")

    if config.verbose:
        logger.info("Font optimization complete")
    return results
