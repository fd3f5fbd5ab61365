"""
Filesystem path constants.

Centralizes default locations so the CLI, build hook and cache agree.
"""

from pathlib import Path

DEFAULT_CACHE_DIR = Path(".persian-fontkit-cache")
DEFAULT_SOURCE_DIR = Path("public/fonts")
DEFAULT_OUTPUT_DIR = Path("public/fonts/optimized")
DEFAULT_DIST_DIR = Path("dist/fonts")

DEFAULT_CSS_NAME = "fonts.css"
DEFAULT_CONFIG_NAME = "persian-fonts.toml"
