"""Tests for font file utilities."""

import pytest

from persian_fontkit.core.errors import FileOperationError
from persian_fontkit.core.font_io import (
    calculate_reduction,
    content_hash,
    describe_font,
    format_file_size,
    iter_fonts,
    md5_bytes,
    md5_file,
    read_file_buffer,
    write_file_buffer,
)


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 B"),
        (512, "512 B"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (2_400_000, "2.29 MB"),
        (3 * 1024**3, "3 GB"),
    ],
)
def test_format_file_size(size, expected):
    """Test human-readable sizes."""
    assert format_file_size(size) == expected


def test_calculate_reduction():
    """Test one-decimal reduction percentages."""
    assert calculate_reduction(2_400_000, 580_800) == "75.8"
    assert calculate_reduction(1000, 1000) == "0.0"
    assert calculate_reduction(1000, 0) == "100.0"
    assert calculate_reduction(0, 0) == "0.0"


def test_describe_font(make_font):
    """Test the descriptor captures absolute path and size."""
    path = make_font("vazir-bold.ttf", size=2048)
    descriptor = describe_font(path)
    assert descriptor.path == str(path.absolute())
    assert descriptor.name == "vazir-bold.ttf"
    assert descriptor.extension == ".ttf"
    assert descriptor.size == 2048
    assert descriptor.size_formatted == "2 KB"


def test_iter_fonts_filters_extensions(temp_font_dir):
    """Test only font files are yielded, sorted."""
    for name in ("b.woff2", "a.TTF", "c.otf", "notes.txt", "d.woff"):
        (temp_font_dir / name).write_bytes(b"x")
    (temp_font_dir / "sub.ttf").mkdir()

    names = [path.name for path in iter_fonts(temp_font_dir)]
    assert names == ["a.TTF", "b.woff2", "c.otf", "d.woff"]


def test_hashes(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"persian")
    assert md5_file(path) == md5_bytes(b"persian")
    assert content_hash(b"persian") == md5_bytes(b"persian")[:8]
    assert len(content_hash(b"persian", 12)) == 12


def test_write_creates_parents(tmp_path):
    path = write_file_buffer(tmp_path / "a" / "b" / "font.woff2", b"wOF2")
    assert read_file_buffer(path) == b"wOF2"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileOperationError) as exc_info:
        read_file_buffer(tmp_path / "missing.ttf")
    assert exc_info.value.operation == "read"
