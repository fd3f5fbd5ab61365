"""
Command-line tests using click's runner and generated fonts.

Run with: pytest tests/integration/test_cli.py -v
"""

import pytest
from click.testing import CliRunner

from persian_fontkit import __version__
from persian_fontkit.cache.store import FontCache
from persian_fontkit.cli.main import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_optimize_directory(runner, make_real_font, tmp_path):
    """Test every font in the directory is optimized and listed in the CSS."""
    regular = make_real_font("vazir-regular.ttf")
    make_real_font("vazir-bold.ttf")
    out = tmp_path / "dist"
    cache_dir = tmp_path / "cache"

    result = runner.invoke(
        cli,
        [
            "optimize",
            str(regular.parent),
            "-o",
            str(out),
            "-f",
            "woff",
            "-s",
            "farsi",
            "-s",
            "latin",
            "--no-hash",
            "--cache-dir",
            str(cache_dir),
        ],
    )

    assert result.exit_code == 0, result.output
    assert (out / "vazir-regular.woff").is_file()
    assert (out / "vazir-bold.woff").is_file()
    css = (out / "fonts.css").read_text(encoding="utf-8")
    assert "Total fonts: 2" in css
    assert "font-weight: 700;" in css
    assert FontCache(cache_dir).get_stats().entries == 2


def test_optimize_without_cache(runner, make_real_font, tmp_path):
    font = make_real_font()
    cache_dir = tmp_path / "cache"

    result = runner.invoke(
        cli,
        [
            "optimize",
            str(font.parent),
            "-o",
            str(tmp_path / "dist"),
            "-f",
            "ttf",
            "--css",
            "persian.css",
            "--no-cache",
            "--cache-dir",
            str(cache_dir),
        ],
    )

    assert result.exit_code == 0, result.output
    assert (tmp_path / "dist" / "persian.css").is_file()
    assert not cache_dir.exists()


def test_optimize_empty_directory(runner, temp_font_dir, tmp_path):
    result = runner.invoke(
        cli, ["optimize", str(temp_font_dir), "-o", str(tmp_path / "dist")]
    )
    assert result.exit_code == 1
    assert not (tmp_path / "dist").exists()


def test_optimize_all_failed(runner, make_font, tmp_path):
    """Test a run where no font could be optimized exits with an error."""
    make_font("broken.ttf", size=0)

    result = runner.invoke(
        cli,
        [
            "optimize",
            str(tmp_path / "fonts"),
            "-o",
            str(tmp_path / "dist"),
            "--no-cache",
        ],
    )

    assert result.exit_code == 1
    assert not (tmp_path / "dist" / "fonts.css").exists()


def test_optimize_rejects_unknown_subset(runner, temp_font_dir):
    result = runner.invoke(cli, ["optimize", str(temp_font_dir), "-s", "emoji"])
    assert result.exit_code == 2


def test_cache_stats_empty(runner, tmp_path):
    result = runner.invoke(
        cli, ["cache", "stats", "--cache-dir", str(tmp_path / "cache")]
    )
    assert result.exit_code == 0
    assert "Entries:    0" in result.output
    assert "Total size: 0 B" in result.output
    assert "Oldest:     -" in result.output


def test_cache_commands(runner, make_real_font, tmp_path):
    """Test stats, clean and clear against a populated cache."""
    font = make_real_font()
    cache_dir = tmp_path / "cache"
    runner.invoke(
        cli,
        [
            "optimize",
            str(font.parent),
            "-o",
            str(tmp_path / "dist"),
            "-f",
            "ttf",
            "--cache-dir",
            str(cache_dir),
        ],
    )

    stats = runner.invoke(cli, ["cache", "stats", "--cache-dir", str(cache_dir)])
    assert "Entries:    1" in stats.output
    assert "Oldest:     -" not in stats.output

    clean = runner.invoke(cli, ["cache", "clean", "--cache-dir", str(cache_dir)])
    assert clean.exit_code == 0
    assert FontCache(cache_dir).get_stats().entries == 1

    clean_all = runner.invoke(
        cli, ["cache", "clean", "--max-age-days", "0", "--cache-dir", str(cache_dir)]
    )
    assert clean_all.exit_code == 0
    assert FontCache(cache_dir).get_stats().entries == 0

    clear = runner.invoke(cli, ["cache", "clear", "--cache-dir", str(cache_dir)])
    assert clear.exit_code == 0
    assert not cache_dir.exists()


def test_info(runner):
    result = runner.invoke(cli, ["info"])
    assert result.exit_code == 0
    assert "farsi" in result.output
    assert "woff2, woff, ttf" in result.output
    assert "Vazir" in result.output


def test_build(runner, make_real_font, tmp_path):
    make_real_font("vazir-regular.ttf")
    make_real_font("vazir-bold.ttf")
    config = tmp_path / "persian-fonts.toml"
    config.write_text(
        """
source_dir = "fonts"
output_dir = "public/optimized"
format = "ttf"
cache = false

[[fonts]]
family = "Vazir"
weights = [700]
""",
        encoding="utf-8",
    )

    result = runner.invoke(cli, ["build", "--config", str(config)])

    assert result.exit_code == 0, result.output
    out = tmp_path / "public" / "optimized"
    assert (out / "vazir-bold.ttf").is_file()
    assert not (out / "vazir-regular.ttf").exists()
    assert "font-family: 'Vazir';" in (out / "fonts.css").read_text(encoding="utf-8")


def test_build_missing_config(runner, tmp_path):
    result = runner.invoke(cli, ["build", "--config", str(tmp_path / "nope.toml")])
    assert result.exit_code == 1


def test_optimize_preload_tags(runner, make_real_font, tmp_path):
    pytest.importorskip("brotli")
    font = make_real_font()

    result = runner.invoke(
        cli,
        [
            "optimize",
            str(font.parent),
            "-o",
            str(tmp_path / "dist"),
            "--no-hash",
            "--no-cache",
            "--preload",
        ],
    )

    assert result.exit_code == 0, result.output
    assert (
        '<link rel="preload" href="./vazir-regular.woff2" as="font" '
        'type="font/woff2" crossorigin="anonymous">'
    ) in result.output


def test_optimize_output_is_file(runner, make_font, tmp_path):
    make_font()
    target = tmp_path / "dist"
    target.write_text("not a directory")

    result = runner.invoke(
        cli, ["optimize", str(tmp_path / "fonts"), "-o", str(target), "--no-cache"]
    )

    assert result.exit_code == 1
    assert target.read_text() == "not a directory"


def test_build_rejects_bare_font_names(runner, tmp_path):
    config = tmp_path / "persian-fonts.toml"
    config.write_text('fonts = ["Vazir"]\n', encoding="utf-8")

    result = runner.invoke(cli, ["build", "--config", str(config)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, AttributeError)
