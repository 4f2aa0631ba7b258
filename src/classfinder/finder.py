"""ClassFinder: filter and sort fully-qualified class names by pattern."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from classfinder.compiler import CompiledPattern, compile_pattern
from classfinder.config import Config
from classfinder.errors import NamesSourceError
from classfinder.utils.names import FullName

__all__ = ["ClassFinder", "find_classes", "read_names"]

_logger = logging.getLogger("classfinder.finder")


def read_names(path: str, encoding: str = "utf-8") -> list[str]:
    """Read one fully-qualified name per line, in file order.

    Raises:
        NamesSourceError: If the file cannot be opened or decoded.
    """
    try:
        with open(path, encoding=encoding) as f:
            # Only line terminators split names; other separators are content
            return [line.rstrip("\n") for line in f]
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise NamesSourceError(path, str(e), cause=e) from e


class ClassFinder:
    """Matches class names against a pattern compiled once at construction.

    Thread safety:
        Holds only the immutable compiled pattern; ``match`` may be called
        concurrently. ``filter`` shards large inputs across a thread pool
        when ``workers > 1``.
    """

    def __init__(self, pattern: str, workers: int = 1, min_parallel: int = 10000) -> None:
        """Compile ``pattern``.

        Args:
            pattern: Raw search pattern.
            workers: Number of shards evaluated in parallel by ``filter``.
            min_parallel: Inputs shorter than this are evaluated in one shard.

        Raises:
            InvalidPatternError: If the pattern is empty or a single space.
        """
        self._pattern: CompiledPattern = compile_pattern(pattern)
        self._workers = max(1, workers)
        self._min_parallel = max(1, min_parallel)

    @classmethod
    def from_config(cls, pattern: str, config: Config) -> ClassFinder:
        return cls(
            pattern,
            workers=config.get("search.workers", 1),
            min_parallel=config.get("search.min_parallel", 10000),
        )

    @property
    def pattern(self) -> CompiledPattern:
        return self._pattern

    @property
    def case_sensitive(self) -> bool:
        return self._pattern.case_sensitive

    @property
    def package_wildcard(self) -> str:
        return self._pattern.package_wildcard

    @property
    def class_wildcard(self) -> str:
        return self._pattern.class_wildcard

    def match(self, full_name: str) -> bool:
        return self._pattern.match(full_name)

    def _filter_shard(self, names: list[str]) -> list[str]:
        match = self._pattern.match
        return [name for name in names if match(name)]

    def filter(self, names: Iterable[str]) -> list[str]:
        """Return the matching names in input order."""
        names = list(names)
        if self._workers == 1 or len(names) < self._min_parallel:
            result = self._filter_shard(names)
            _logger.debug("Scanned %d names, %d matched", len(names), len(result))
            return result

        size = -(-len(names) // self._workers)
        shards = [names[i : i + size] for i in range(0, len(names), size)]
        with ThreadPoolExecutor(max_workers=self._workers) as pool:
            # map() yields in submission order, so the merge keeps input order
            parts = list(pool.map(self._filter_shard, shards))
        result = [name for part in parts for name in part]
        _logger.debug(
            "Scanned %d names in %d shards, %d matched",
            len(names),
            len(shards),
            len(result),
        )
        return result

    def search(self, names: Iterable[str]) -> list[FullName]:
        """Return the matching names sorted by class name, ignoring package."""
        return sorted(
            (FullName.parse(name) for name in self.filter(names)),
            key=FullName.sort_key,
        )


def find_classes(path: str, pattern: str, config: Config | None = None) -> list[FullName]:
    """Read names from ``path`` and return those matching ``pattern``, sorted.

    Raises:
        InvalidPatternError: If the pattern is empty or a single space.
        NamesSourceError: If the names file cannot be read.
    """
    config = config or Config()
    finder = ClassFinder.from_config(pattern, config)
    names = read_names(path, encoding=config.get("input.encoding", "utf-8"))
    return finder.search(names)
