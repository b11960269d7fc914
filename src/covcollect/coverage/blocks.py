"""Block deduplication for a single file.

A profile can list the same block more than once, e.g. when a package is
instrumented by several test binaries via -coverpkg. Blocks are identified by
their start position only:

- block[(start_line, start_col)] = first occurrence, with
  hit_count = sum of hit_count across all occurrences

End positions and statement counts of later occurrences are ignored.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Protocol


class Span(Protocol):
    """Anything carrying a block's position and counts."""

    @property
    def start_line(self) -> int: ...

    @property
    def start_col(self) -> int: ...

    @property
    def end_line(self) -> int: ...

    @property
    def end_col(self) -> int: ...

    @property
    def num_statements(self) -> int: ...

    @property
    def hit_count(self) -> int: ...


@dataclass(frozen=True, slots=True)
class Block:
    """A covered source span within one file."""

    start_line: int
    start_col: int
    end_line: int
    end_col: int
    num_statements: int
    hit_count: int

    @property
    def covered(self) -> bool:
        return self.hit_count > 0


def unique_blocks(spans: Iterable[Span]) -> list[Block]:
    """Merge spans sharing a start position and return them in source order.

    Args:
        spans: Records (or blocks) for one file, in arrival order.

    Returns:
        Blocks sorted by (start_line, start_col).
    """
    merged: dict[tuple[int, int], Block] = {}
    for span in spans:
        key = (span.start_line, span.start_col)
        existing = merged.get(key)
        if existing is None:
            merged[key] = Block(
                start_line=span.start_line,
                start_col=span.start_col,
                end_line=span.end_line,
                end_col=span.end_col,
                num_statements=span.num_statements,
                hit_count=span.hit_count,
            )
        else:
            merged[key] = replace(existing, hit_count=existing.hit_count + span.hit_count)

    return [merged[key] for key in sorted(merged)]
