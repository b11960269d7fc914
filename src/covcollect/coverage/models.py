"""Cover profile data model.

Records are immutable and come straight from the profile. FileCoverage and
PackageCoverage are the aggregates built from them; both derive their numbers
from deduplicated blocks, never from the raw records.
"""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field

from covcollect.coverage.blocks import Block, unique_blocks

SET_MODE = "set"


@dataclass(frozen=True, slots=True)
class CoverageRecord:
    """One line of a cover profile: a span of a file with its counts."""

    file: str
    start_line: int
    start_col: int
    end_line: int
    end_col: int
    num_statements: int
    hit_count: int

    @property
    def block(self) -> Block:
        return Block(
            start_line=self.start_line,
            start_col=self.start_col,
            end_line=self.end_line,
            end_col=self.end_col,
            num_statements=self.num_statements,
            hit_count=self.hit_count,
        )


@dataclass(slots=True)
class Profile:
    """Parsed profile data for one file: the mode plus its records in file order."""

    file_name: str
    mode: str
    records: list[CoverageRecord] = field(default_factory=list)


def _sum_statements(blocks: list[Block], *, covered_only: bool = False) -> int:
    return sum(b.num_statements for b in blocks if b.covered or not covered_only)


@dataclass(slots=True)
class FileCoverage:
    """All records seen for one file path, in arrival order.

    Records may repeat a span when the same code was instrumented more than
    once; unique_blocks folds those together. The folded blocks are cached
    until the next add().
    """

    path: str
    records: list[CoverageRecord] = field(default_factory=list)
    _blocks: list[Block] | None = field(default=None, init=False, repr=False, compare=False)

    def add(self, record: CoverageRecord) -> None:
        self.records.append(record)
        self._blocks = None

    @property
    def unique_blocks(self) -> list[Block]:
        if self._blocks is None:
            self._blocks = unique_blocks(self.records)
        return self._blocks

    @property
    def statements(self) -> int:
        return _sum_statements(self.unique_blocks)

    @property
    def covered_statements(self) -> int:
        return _sum_statements(self.unique_blocks, covered_only=True)


@dataclass(slots=True)
class PackageCoverage:
    """Coverage for every file under one directory.

    ``files`` is kept sorted by path after every insertion; lookups of known
    paths go through a dict index.
    """

    package: str
    files: list[FileCoverage] = field(default_factory=list)
    _index: dict[str, FileCoverage] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self.files.sort(key=lambda f: f.path)
        self._index = {f.path: f for f in self.files}

    def file(self, path: str) -> FileCoverage:
        """Return the FileCoverage for path, adding it in sorted position if new."""
        fc = self._index.get(path)
        if fc is not None:
            return fc
        fc = FileCoverage(path=path)
        idx = bisect.bisect_left(self.files, path, key=lambda f: f.path)
        self.files.insert(idx, fc)
        self._index[path] = fc
        return fc

    @property
    def statements(self) -> int:
        return sum(f.statements for f in self.files)

    @property
    def covered_statements(self) -> int:
        return sum(f.covered_statements for f in self.files)

    def coverage(self) -> float | None:
        """Fraction of statements covered (0.0 to 1.0).

        Returns None when the package has no statements at all, so callers
        can report "no data" instead of formatting a NaN.
        """
        blocks = [b for f in self.files for b in f.unique_blocks]
        total = _sum_statements(blocks)
        if total == 0:
            return None
        return _sum_statements(blocks, covered_only=True) / total
