"""
Main CLI entry point for persian-fontkit.
"""

import click

from persian_fontkit import __version__
from persian_fontkit.config.paths import (
    DEFAULT_CACHE_DIR,
    DEFAULT_CONFIG_NAME,
    DEFAULT_CSS_NAME,
    DEFAULT_DIST_DIR,
)
from persian_fontkit.config.subsets import DEFAULT_SUBSETS, SUBSET_CONFIGS
from persian_fontkit.config.weights import OUTPUT_FORMATS

cache_dir_option = click.option(
    "--cache-dir",
    type=click.Path(file_okay=False),
    default=str(DEFAULT_CACHE_DIR),
    show_default=True,
    help="Cache directory.",
)


@click.group()
@click.version_option(version=__version__)
def cli():
    """Persian web font optimizer."""
    pass


@cli.command()
@click.argument("input_dir", type=click.Path(exists=True, file_okay=False))
@click.option(
    "-o",
    "--output",
    "output_dir",
    type=click.Path(),
    default=str(DEFAULT_DIST_DIR),
    show_default=True,
    help="Output directory.",
)
@click.option(
    "-s",
    "--subset",
    "subsets",
    multiple=True,
    type=click.Choice(list(SUBSET_CONFIGS)),
    help="Subset to include (repeatable). Defaults to all subsets.",
)
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="woff2",
    show_default=True,
)
@click.option("--hash/--no-hash", "use_hash", default=True, help="Hash filenames.")
@click.option("--css", "css_name", default=DEFAULT_CSS_NAME, show_default=True)
@click.option("--cache/--no-cache", "use_cache", default=True)
@click.option(
    "--preload", is_flag=True, help="Print <link rel=\"preload\"> tags for the output."
)
@cache_dir_option
def optimize(
    input_dir,
    output_dir,
    subsets,
    output_format,
    use_hash,
    css_name,
    use_cache,
    preload,
    cache_dir,
):
    """Optimize every font in INPUT_DIR."""
    import sys
    from pathlib import Path

    from persian_fontkit.cache.store import FontCache
    from persian_fontkit.core.css import generate_preload_tags
    from persian_fontkit.core.errors import ValidationError
    from persian_fontkit.core.font_io import (
        calculate_reduction,
        format_file_size,
        iter_fonts,
    )
    from persian_fontkit.core.validation import validate_directory
    from persian_fontkit.pipeline.optimizer import (
        generate_optimized_css,
        optimize_fonts,
    )
    from persian_fontkit.utils.logging import logger

    input_path = Path(input_dir).resolve()
    output_path = Path(output_dir).resolve()
    logger.info(f"Input:  {input_path}")
    logger.info(f"Output: {output_path}")

    try:
        validate_directory(output_path)
    except ValidationError as e:
        logger.error(str(e))
        sys.exit(1)

    font_files = list(iter_fonts(input_path))
    if not font_files:
        logger.error(f"No font files found in {input_path}")
        logger.error("  Supported formats: .ttf, .otf, .woff, .woff2")
        sys.exit(1)

    logger.info(f"Found {len(font_files)} font file(s)")

    results = optimize_fonts(
        font_files,
        output_path,
        font_cache=FontCache(cache_dir) if use_cache else None,
        subsets=tuple(subsets) or DEFAULT_SUBSETS,
        format=output_format,
        use_hash=use_hash,
        cache=use_cache,
        cache_dir=cache_dir,
    )

    for result in results:
        logger.info(
            f"{result.original.name}: {result.original.size_formatted} -> "
            f"{result.optimized.size_formatted} ({result.reduction}% smaller)"
        )

    if not results:
        logger.error("No fonts were successfully optimized")
        sys.exit(1)

    css_path = generate_optimized_css(results, output_path / css_name)

    total_original = sum(r.original.size for r in results)
    total_optimized = sum(r.optimized.size for r in results)
    logger.info(f"Optimized {len(results)}/{len(font_files)} fonts")
    logger.info(f"  Original size:  {format_file_size(total_original)}")
    logger.info(f"  Optimized size: {format_file_size(total_optimized)}")
    saved = format_file_size(total_original - total_optimized)
    logger.info(f"  Total saved:    {saved}")
    logger.info(
        f"  Size reduction: {calculate_reduction(total_original, total_optimized)}%"
    )
    logger.info(f"  CSS file: {css_path}")

    if preload:
        click.echo(generate_preload_tags(f"./{r.optimized.name}" for r in results))


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=DEFAULT_CONFIG_NAME,
    show_default=True,
    help="TOML build configuration.",
)
def build(config_path):
    """Optimize the font families listed in a build configuration."""
    import sys

    from persian_fontkit.core.errors import FontKitError
    from persian_fontkit.pipeline.build import load_config, optimize_fonts_for_build
    from persian_fontkit.utils.logging import logger

    try:
        config = load_config(config_path)
    except FontKitError as e:
        logger.error(str(e))
        sys.exit(1)

    results = optimize_fonts_for_build(config)
    logger.info(f"Optimized {len(results)} font(s)")


@cli.group()
def cache():
    """Optimization cache commands."""
    pass


@cache.command()
@cache_dir_option
def stats(cache_dir):
    """Show cache statistics."""
    from datetime import datetime

    from persian_fontkit.cache.store import FontCache
    from persian_fontkit.core.font_io import format_file_size

    cache_stats = FontCache(cache_dir).get_stats()

    def timestamp(value):
        if value is None:
            return "-"
        return datetime.fromtimestamp(value / 1000).isoformat(timespec="seconds")

    click.echo(f"Entries:    {cache_stats.entries}")
    click.echo(f"Total size: {format_file_size(cache_stats.total_size)}")
    click.echo(f"Oldest:     {timestamp(cache_stats.oldest_entry)}")
    click.echo(f"Newest:     {timestamp(cache_stats.newest_entry)}")


@cache.command()
@cache_dir_option
def clear(cache_dir):
    """Remove every cache entry."""
    from persian_fontkit.cache.store import FontCache
    from persian_fontkit.utils.logging import logger

    FontCache(cache_dir).clear()
    logger.info(f"Cleared {cache_dir}")


@cache.command()
@cache_dir_option
@click.option(
    "--max-age-days",
    type=click.FloatRange(min=0),
    default=7,
    show_default=True,
    help="Delete entries at least this old.",
)
def clean(cache_dir, max_age_days):
    """Remove old cache entries."""
    from persian_fontkit.cache.store import FontCache
    from persian_fontkit.utils.logging import logger

    max_age_ms = int(max_age_days * 24 * 60 * 60 * 1000)
    deleted = FontCache(cache_dir).clean_old(max_age_ms)
    logger.info(f"Deleted {deleted} cache entries")


@cli.command()
def info():
    """Show built-in subsets and popular Persian fonts."""
    from persian_fontkit.config.subsets import PERSIAN_FONTS

    click.echo(f"persian-fontkit {__version__}")
    click.echo("")
    click.echo("Subsets:")
    for config in SUBSET_CONFIGS.values():
        click.echo(f"  {config.name:<12} {config.description}")
    click.echo("")
    click.echo(f"Output formats: {', '.join(OUTPUT_FORMATS)}")
    click.echo(f"Popular Persian fonts: {', '.join(PERSIAN_FONTS)}")


if __name__ == "__main__":
    cli()
