"""
Font optimization pipeline.

Validates a request, consults the result cache, subsets the font, writes the
optimized file and renders its @font-face rule.
"""

from collections.abc import Iterable
from dataclasses import replace
from pathlib import Path

from persian_fontkit.cache.store import FontCache
from persian_fontkit.config.subsets import get_subset_codepoints, get_unicode_ranges
from persian_fontkit.core.css import FontFace, generate_css_file, generate_font_face
from persian_fontkit.core.errors import (
    PASSTHROUGH_ERRORS,
    FontOptimizationError,
)
from persian_fontkit.core.font_io import (
    calculate_reduction,
    content_hash,
    describe_font,
    read_file_buffer,
    write_file_buffer,
)
from persian_fontkit.core.models import OptimizationRequest, OptimizationResult
from persian_fontkit.core.naming import FontNaming, optimized_filename
from persian_fontkit.core.subsetter import SubsetEngine, subset_font
from persian_fontkit.core.validation import validate_font_file, validate_request
from persian_fontkit.utils.logging import logger


def optimize_font(
    request: OptimizationRequest,
    *,
    font_cache: FontCache | None = None,
    engine: SubsetEngine = subset_font,
) -> OptimizationResult:
    """
    Optimize a single font file.

    The cache is keyed by input path only: a cached result is returned even
    if subsets, format or weight differ from the request that produced it.

    Args:
        request: What to optimize and how
        font_cache: Cache handle; built from request.cache_dir when None
        engine: Subsetting engine

    Returns:
        Result describing the original and optimized files

    Raises:
        ValidationError, UnsupportedFormatError, InvalidFontError: Bad request
        FontOptimizationError: Anything that failed after validation
    """
    input_path = str(request.input_path)

    try:
        validate_request(request)
        validate_font_file(input_path)
    except PASSTHROUGH_ERRORS:
        raise
    except Exception as e:
        raise FontOptimizationError(f"Validation failed: {e}", input_path, e) from e

    if request.cache and font_cache is None:
        font_cache = FontCache(request.cache_dir)

    if request.cache:
        cached = font_cache.get(input_path)
        if cached is not None:
            logger.debug(f"Cache hit: {input_path}")
            return cached

    try:
        return _transform(
            request, input_path, font_cache if request.cache else None, engine
        )
    except FontOptimizationError:
        raise
    except Exception as e:
        raise FontOptimizationError(
            f"Font optimization failed: {e}", input_path, e
        ) from e


def _transform(
    request: OptimizationRequest,
    input_path: str,
    font_cache: FontCache | None,
    engine: SubsetEngine,
) -> OptimizationResult:
    original = describe_font(input_path)
    naming = FontNaming.from_filename(
        original.name,
        family=request.font_family,
        weight=request.font_weight,
        style=request.font_style,
    )

    font_buffer = read_file_buffer(input_path)
    if not font_buffer:
        raise FontOptimizationError(
            "Font file is empty or could not be read", input_path
        )

    characters = get_subset_codepoints(request.subsets)
    if not characters:
        raise FontOptimizationError(
            "No characters to subset. Check subset configuration.", input_path
        )

    try:
        subset_buffer = engine(font_buffer, characters, request.format)
    except Exception as e:
        raise FontOptimizationError(f"Failed to subset font: {e}", input_path, e) from e

    if not subset_buffer:
        raise FontOptimizationError(
            "Font subsetting produced empty result", input_path
        )

    output_name = optimized_filename(
        original.name,
        request.format,
        content_hash(subset_buffer) if request.use_hash else None,
    )
    output_path = write_file_buffer(
        Path(request.output_dir) / output_name, subset_buffer
    )
    optimized = describe_font(output_path)

    css = generate_font_face(
        FontFace(
            font_family=naming.family,
            font_path=f"./{output_name}",
            font_weight=naming.weight,
            font_style=naming.style,
            font_display=request.font_display,
            unicode_range=get_unicode_ranges(request.subsets),
        )
    )

    result = OptimizationResult(
        original=original,
        optimized=optimized,
        reduction=calculate_reduction(original.size, optimized.size),
        css=css,
        font_family=naming.family,
        font_weight=naming.weight,
    )

    # The artifact is on disk before the entry pointing at it is written
    if font_cache is not None:
        font_cache.set(input_path, result)

    return result


def optimize_fonts(
    input_paths: Iterable[str | Path],
    output_dir: str | Path,
    *,
    font_cache: FontCache | None = None,
    engine: SubsetEngine = subset_font,
    **options,
) -> list[OptimizationResult]:
    """
    Optimize several fonts one after another.

    A failing font is logged and skipped; the returned list keeps the input
    order of the fonts that succeeded.

    Args:
        input_paths: Fonts to optimize
        output_dir: Directory for optimized files
        font_cache: Shared cache handle
        engine: Subsetting engine
        **options: Other OptimizationRequest fields applied to every font
    """
    base = OptimizationRequest(input_path="", output_dir=output_dir, **options)
    if base.cache and font_cache is None:
        font_cache = FontCache(base.cache_dir)

    results: list[OptimizationResult] = []
    for input_path in input_paths:
        request = replace(base, input_path=input_path)
        try:
            result = optimize_font(request, font_cache=font_cache, engine=engine)
            results.append(result)
        except Exception as e:
            logger.error(f"Error optimizing {input_path}: {e}")
    return results


def calculate_average_reduction(results: Iterable[OptimizationResult]) -> str:
    """Reduction across all results, weighted by file size."""
    results = list(results)
    total_original = sum(r.original.size for r in results)
    total_optimized = sum(r.optimized.size for r in results)
    return calculate_reduction(total_original, total_optimized)


def generate_optimized_css(
    results: Iterable[OptimizationResult], output_path: str | Path
) -> Path:
    """
    Write a stylesheet containing every result's @font-face rule.

    Args:
        results: Optimization results
        output_path: Stylesheet path

    Returns:
        Path written
    """
    results = list(results)
    css = generate_css_file(
        [r.css for r in results],
        [
            f"Total fonts: {len(results)}",
            f"Average size reduction: {calculate_average_reduction(results)}%",
        ],
    )
    return write_file_buffer(output_path, css.encode("utf-8"))
