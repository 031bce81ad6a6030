"""
Opt-in timing of the parser's hot sections.

The mode is fixed at import time. With ``TAGJSON_PROFILE`` in the
environment (and assertions enabled) every ``ProfileContext`` block adds
its elapsed time to a per-section table; otherwise ``ProfileContext`` is an
empty context manager and nothing is recorded.
"""

import os
import time
from collections.abc import Mapping
from dataclasses import dataclass

PROFILE_HOT_PATHS = __debug__ and "TAGJSON_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Accumulated timings of one named section."""

    section: str
    calls: int = 0
    elapsed_ns: int = 0
    chars: int = 0

    def add(self, elapsed_ns: int, chars: int = 0) -> None:
        self.calls += 1
        self.elapsed_ns += elapsed_ns
        self.chars += chars

    @property
    def mean_ns(self) -> float:
        return self.elapsed_ns / self.calls if self.calls else 0.0


_sections: dict[str, HotPathStats] = {}


class _TimedSection:
    __slots__ = ("_name", "_chars", "_started")

    def __init__(self, name: str, chars: int = 0) -> None:
        self._name = name
        self._chars = chars
        self._started = 0

    def __enter__(self) -> None:
        self._started = time.perf_counter_ns()

    def __exit__(self, *exc_info: object) -> None:
        elapsed = time.perf_counter_ns() - self._started
        stats = _sections.get(self._name)
        if stats is None:
            stats = _sections[self._name] = HotPathStats(self._name)
        stats.add(elapsed, self._chars)


class _NullSection:
    __slots__ = ()

    def __init__(self, name: str, chars: int = 0) -> None:
        pass

    def __enter__(self) -> None:
        pass

    def __exit__(self, *exc_info: object) -> None:
        pass


ProfileContext: type[_TimedSection] | type[_NullSection] = (
    _TimedSection if PROFILE_HOT_PATHS else _NullSection
)


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the section table; empty unless profiling."""
    return dict(_sections)


def clear_hot_path_stats() -> None:
    _sections.clear()


def format_hot_path_stats(
    stats: Mapping[str, HotPathStats] | None = None,
) -> str:
    """
    Formats section timings as a table, largest total time first.

    Defaults to the live section table.
    """
    if stats is None:
        stats = _sections

    lines = [f"{'section':<16} {'calls':>8} {'total ms':>10} {'mean us':>10}"]
    ranked = sorted(stats.values(), key=lambda s: s.elapsed_ns, reverse=True)
    for entry in ranked:
        lines.append(
            f"{entry.section:<16} {entry.calls:>8}"
            f" {entry.elapsed_ns / 1e6:>10.3f} {entry.mean_ns / 1e3:>10.3f}"
        )
    return "\n".join(lines)
