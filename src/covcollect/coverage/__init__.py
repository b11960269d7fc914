"""Package-level coverage aggregation for Go cover profiles.

This package provides:
- Go cover profile parsing (set mode)
- Per-file block deduplication
- Per-package statement coverage
- Aligned text and structured JSON reports

Usage:
    from covcollect.coverage import CoverageCollector, parse_profiles, render

    collector = CoverageCollector(parse_profiles(Path("cover.out")))
    collector.validate()
    print(render(collector.collect_packages()), end="")
"""

from covcollect.coverage.blocks import Block, unique_blocks
from covcollect.coverage.collector import CoverageCollector, package_of
from covcollect.coverage.models import (
    SET_MODE,
    CoverageRecord,
    FileCoverage,
    PackageCoverage,
    Profile,
)
from covcollect.coverage.parser import parse_profile_text, parse_profiles
from covcollect.coverage.report import build_summary, format_coverage, render

__all__ = [
    # Models
    "SET_MODE",
    "Block",
    "CoverageRecord",
    "FileCoverage",
    "PackageCoverage",
    "Profile",
    # Parsing
    "parse_profile_text",
    "parse_profiles",
    # Aggregation
    "CoverageCollector",
    "package_of",
    "unique_blocks",
    # Report
    "build_summary",
    "format_coverage",
    "render",
]
