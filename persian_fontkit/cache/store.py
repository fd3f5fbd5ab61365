"""
Persistent cache of font optimization results.

Entries live in one JSON file per input, named by the MD5 of the input's
resolved absolute path. The path only locates an entry; an entry is trusted
only while the input's content hash matches and the optimized file it points
to still exists. Storage problems never reach callers: they read as misses
or no-ops.
"""

import json
import os
import tempfile
import time
from dataclasses import asdict, dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from persian_fontkit.config.paths import DEFAULT_CACHE_DIR
from persian_fontkit.core.font_io import describe_with_size, md5_bytes, md5_file
from persian_fontkit.core.models import OptimizationResult
from persian_fontkit.utils.logging import logger

# Bump to invalidate every existing entry on its next lookup
CACHE_VERSION = "1.0.0"

ENTRY_SUFFIX = ".json"
DEFAULT_MAX_AGE_MS = 7 * 24 * 60 * 60 * 1000


def now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class CachedResult:
    """Flattened scalar fields of an OptimizationResult."""

    original_size: int
    optimized_size: int
    reduction: str
    font_family: str
    font_weight: int
    output_path: str
    css_content: str


@dataclass
class CacheEntry:
    """On-disk form of a cached result."""

    input_hash: str
    timestamp: int  # ms since epoch
    version: str
    result: CachedResult

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CacheEntry":
        return cls(
            input_hash=data["input_hash"],
            timestamp=int(data["timestamp"]),
            version=data["version"],
            result=CachedResult(**data["result"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class CacheStatus(Enum):
    """Outcome of a cache lookup."""

    HIT = "hit"
    MISS = "miss"  # no entry
    STALE = "stale"  # entry found and removed
    ERROR = "error"  # entry unreadable; treated as a miss


@dataclass(frozen=True)
class CacheLookup:
    status: CacheStatus
    result: OptimizationResult | None = None
    reason: str | None = None

    @property
    def hit(self) -> bool:
        return self.status is CacheStatus.HIT


@dataclass(frozen=True)
class CacheStats:
    entries: int = 0
    total_size: int = 0
    oldest_entry: int | None = None
    newest_entry: int | None = None


class FontCache:
    """File-backed store of optimization results keyed by input path."""

    def __init__(
        self, cache_dir: str | Path = DEFAULT_CACHE_DIR, version: str = CACHE_VERSION
    ):
        self.cache_dir = Path(cache_dir)
        self.version = version

    def __repr__(self) -> str:
        return f"FontCache({str(self.cache_dir)!r})"

    @staticmethod
    def cache_key(input_path: str | Path) -> str:
        """MD5 of the resolved absolute input path."""
        return md5_bytes(str(Path(input_path).resolve()).encode("utf-8"))

    def entry_path(self, input_path: str | Path) -> Path:
        return self.cache_dir / f"{self.cache_key(input_path)}{ENTRY_SUFFIX}"

    def lookup(self, input_path: str | Path) -> CacheLookup:
        """
        Look up and validate the entry for an input.

        Stale entries (schema version, input content or missing output) are
        deleted as they are found.
        """
        try:
            entry_path = self.entry_path(input_path)
            if not entry_path.is_file():
                return CacheLookup(CacheStatus.MISS)

            entry = CacheEntry.from_dict(
                json.loads(entry_path.read_text(encoding="utf-8"))
            )

            if entry.version != self.version:
                self.delete(input_path)
                return CacheLookup(
                    CacheStatus.STALE,
                    reason=f"version {entry.version} != {self.version}",
                )

            if entry.input_hash != md5_file(input_path):
                self.delete(input_path)
                return CacheLookup(CacheStatus.STALE, reason="input content changed")

            if not Path(entry.result.output_path).is_file():
                self.delete(input_path)
                return CacheLookup(CacheStatus.STALE, reason="optimized file missing")

            result = self._entry_to_result(entry, input_path)
            return CacheLookup(CacheStatus.HIT, result)
        except (OSError, ArithmeticError, ValueError, KeyError, TypeError) as e:
            logger.debug(f"Cache lookup failed for {input_path}: {e}")
            return CacheLookup(CacheStatus.ERROR, reason=str(e))

    def get(self, input_path: str | Path) -> OptimizationResult | None:
        """Cached result for an input, or None on any kind of miss."""
        return self.lookup(input_path).result

    def set(self, input_path: str | Path, result: OptimizationResult) -> None:
        """Store a result; failures are logged and ignored."""
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
            entry = CacheEntry(
                input_hash=md5_file(input_path),
                timestamp=now_ms(),
                version=self.version,
                result=CachedResult(
                    original_size=result.original.size,
                    optimized_size=result.optimized.size,
                    reduction=result.reduction,
                    font_family=result.font_family,
                    font_weight=result.font_weight,
                    output_path=result.optimized.path,
                    css_content=result.css,
                ),
            )
            self._write_atomic(self.entry_path(input_path), entry)
        except (OSError, TypeError, ValueError) as e:
            logger.warning(f"Failed to write cache: {e}")

    def delete(self, input_path: str | Path) -> None:
        """Remove the entry for an input if present."""
        try:
            self.entry_path(input_path).unlink(missing_ok=True)
        except OSError as e:
            logger.debug(f"Failed to delete cache entry for {input_path}: {e}")

    def clear(self) -> None:
        """Remove every entry, then the cache directory if it is empty."""
        if not self.cache_dir.exists():
            return
        try:
            for path in self.cache_dir.iterdir():
                try:
                    path.unlink()
                except OSError:
                    continue
            self.cache_dir.rmdir()
        except OSError as e:
            logger.warning(f"Failed to clear cache: {e}")

    def get_stats(self) -> CacheStats:
        """Entry count, total bytes, and oldest/newest entry timestamps."""
        entries = 0
        total_size = 0
        timestamps: list[int] = []
        try:
            for path in self._entry_files():
                entries += 1
                total_size += path.stat().st_size
                entry = self._read_entry(path)
                if entry is not None:
                    timestamps.append(entry.timestamp)
        except OSError:
            return CacheStats()

        return CacheStats(
            entries=entries,
            total_size=total_size,
            oldest_entry=min(timestamps) if timestamps else None,
            newest_entry=max(timestamps) if timestamps else None,
        )

    def clean_old(self, max_age_ms: int = DEFAULT_MAX_AGE_MS) -> int:
        """
        Delete entries at least max_age_ms old.

        Returns:
            Number of entries deleted
        """
        now = now_ms()
        deleted = 0
        try:
            for path in self._entry_files():
                entry = self._read_entry(path)
                if entry is None or now - entry.timestamp < max_age_ms:
                    continue
                try:
                    path.unlink()
                    deleted += 1
                except OSError:
                    continue
        except OSError:
            pass
        return deleted

    def _entry_files(self) -> list[Path]:
        if not self.cache_dir.is_dir():
            return []
        return sorted(self.cache_dir.glob(f"*{ENTRY_SUFFIX}"))

    @staticmethod
    def _read_entry(path: Path) -> CacheEntry | None:
        try:
            return CacheEntry.from_dict(json.loads(path.read_text(encoding="utf-8")))
        except (OSError, ArithmeticError, ValueError, KeyError, TypeError):
            return None

    def _write_atomic(self, path: Path, entry: CacheEntry) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self.cache_dir, prefix=f".{path.stem}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(entry.to_dict(), f, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    @staticmethod
    def _entry_to_result(
        entry: CacheEntry, input_path: str | Path
    ) -> OptimizationResult:
        input_path = Path(input_path).absolute()
        output_path = Path(entry.result.output_path)
        # Both files must still be readable
        input_path.stat()
        output_path.stat()
        return OptimizationResult(
            original=describe_with_size(input_path, entry.result.original_size),
            optimized=describe_with_size(output_path, entry.result.optimized_size),
            reduction=entry.result.reduction,
            css=entry.result.css_content,
            font_family=entry.result.font_family,
            font_weight=entry.result.font_weight,
        )
