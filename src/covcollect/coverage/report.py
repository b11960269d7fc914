"""Package coverage report generation.

Two renderings of the same package list:

render() - aligned text, one line per package:
    github.com/user/pkg      coverage (46.7)%
    github.com/user/pkg/sub  coverage (100.0)%

build_summary() - structured dict for JSON output:
{
    "packages": [
        {
            "package": str,
            "files": int,
            "statements": int,
            "covered_statements": int,
            "coverage_percent": float | null  # null when no statements
        },
        ...
    ],
    "total": {
        "packages": int,
        "statements": int,
        "covered_statements": int,
        "coverage_percent": float | null
    }
}
"""

from collections.abc import Sequence
from typing import Any

from covcollect.coverage.models import PackageCoverage

NO_DATA_LABEL = "no data"


def _percent(covered: int, total: int) -> float | None:
    if total == 0:
        return None
    return round(covered / total * 100.0, 1)


def format_coverage(ratio: float | None, *, no_data_label: str = NO_DATA_LABEL) -> str:
    """Format a coverage ratio as the report's parenthesised figure.

    Examples:
        0.4667 -> "(46.7)%"
        None -> "(no data)"
    """
    if ratio is None:
        return f"({no_data_label})"
    return f"({100.0 * ratio:.1f})%"


def render(
    packages: Sequence[PackageCoverage],
    *,
    no_data_label: str = NO_DATA_LABEL,
) -> str:
    """Render packages as aligned report lines.

    Args:
        packages: Packages in the order they should be printed.
        no_data_label: Shown for packages without any statements.

    Returns:
        Report text, one newline-terminated line per package.
    """
    width = max((len(p.package) for p in packages), default=0)
    lines = []
    for p in packages:
        padding = " " * (width - len(p.package) + 1)
        figure = format_coverage(p.coverage(), no_data_label=no_data_label)
        lines.append(f"{p.package}{padding}coverage {figure}\n")
    return "".join(lines)


def build_summary(packages: Sequence[PackageCoverage]) -> dict[str, Any]:
    """Build a structured coverage summary suitable for JSON serialization."""
    entries: list[dict[str, Any]] = []
    total_statements = 0
    total_covered = 0

    for p in packages:
        statements = p.statements
        covered = p.covered_statements
        total_statements += statements
        total_covered += covered
        entries.append(
            {
                "package": p.package,
                "files": len(p.files),
                "statements": statements,
                "covered_statements": covered,
                "coverage_percent": _percent(covered, statements),
            }
        )

    return {
        "packages": entries,
        "total": {
            "packages": len(entries),
            "statements": total_statements,
            "covered_statements": total_covered,
            "coverage_percent": _percent(total_covered, total_statements),
        },
    }
