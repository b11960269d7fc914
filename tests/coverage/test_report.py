"""Tests for coverage/report.py - text and JSON package reports."""

import pytest

from covcollect.coverage.models import CoverageRecord, PackageCoverage
from covcollect.coverage.report import build_summary, format_coverage, render


def _package(name: str, *blocks: tuple[int, int]) -> PackageCoverage:
    """Build a single-file package from (stmts, hits) tuples."""
    pkg = PackageCoverage(package=name)
    path = f"{name}/file.go"
    fc = pkg.file(path)
    for line, (stmts, hits) in enumerate(blocks, start=1):
        fc.add(
            CoverageRecord(
                file=path,
                start_line=line,
                start_col=1,
                end_line=line,
                end_col=10,
                num_statements=stmts,
                hit_count=hits,
            )
        )
    return pkg


class TestFormatCoverage:
    """Tests for format_coverage."""

    @pytest.mark.parametrize(
        ("ratio", "expected"),
        [
            (0.0, "(0.0)%"),
            (1.0, "(100.0)%"),
            (7 / 15, "(46.7)%"),
            (1 / 3, "(33.3)%"),
            (0.99999, "(100.0)%"),
        ],
    )
    def test_one_decimal_percent(self, ratio: float, expected: str) -> None:
        assert format_coverage(ratio) == expected

    def test_no_data(self) -> None:
        assert format_coverage(None) == "(no data)"

    def test_custom_no_data_label(self) -> None:
        assert format_coverage(None, no_data_label="n/a") == "(n/a)"


class TestRender:
    """Tests for render."""

    def test_empty(self) -> None:
        assert render([]) == ""

    def test_single_package(self) -> None:
        assert render([_package("pkg", (2, 1), (2, 0))]) == "pkg coverage (50.0)%\n"

    def test_pads_to_longest_package(self) -> None:
        """'a' is padded to the width of 'bb' before the coverage column."""
        text = render([_package("a", (1, 1)), _package("bb", (1, 0))])

        assert text == "a  coverage (100.0)%\nbb coverage (0.0)%\n"

    def test_coverage_column_aligned(self) -> None:
        packages = [
            _package("github.com/user/pkg", (1, 1)),
            _package("github.com/user/pkg/internal/sub", (3, 0)),
            _package("x", (4, 1)),
        ]

        lines = render(packages).splitlines()

        columns = {line.index("coverage (") for line in lines}
        assert len(columns) == 1

    def test_package_order_preserved(self) -> None:
        text = render([_package("b", (1, 1)), _package("a", (1, 1))])
        assert [line.split()[0] for line in text.splitlines()] == ["b", "a"]

    def test_mixed_files_rendered_as_rounded_percent(self) -> None:
        pkg = _package("pkg", (7, 1), (3, 0))
        other = pkg.file("pkg/other.go")
        other.add(
            CoverageRecord(
                file="pkg/other.go",
                start_line=1,
                start_col=1,
                end_line=3,
                end_col=2,
                num_statements=5,
                hit_count=0,
            )
        )
        assert render([pkg]) == "pkg coverage (46.7)%\n"

    def test_no_data_package(self) -> None:
        text = render([_package("gen", (0, 0)), _package("pkg", (1, 1))])
        assert text == "gen coverage (no data)\npkg coverage (100.0)%\n"

    def test_deterministic(self) -> None:
        packages = [_package("a", (3, 1), (2, 0)), _package("b/c", (1, 0))]
        assert render(packages) == render(packages)


class TestBuildSummary:
    """Tests for build_summary."""

    def test_empty(self) -> None:
        assert build_summary([]) == {
            "packages": [],
            "total": {
                "packages": 0,
                "statements": 0,
                "covered_statements": 0,
                "coverage_percent": None,
            },
        }

    def test_packages_and_total(self) -> None:
        summary = build_summary([_package("a", (7, 1), (8, 0)), _package("b", (5, 2))])

        assert summary["packages"] == [
            {
                "package": "a",
                "files": 1,
                "statements": 15,
                "covered_statements": 7,
                "coverage_percent": 46.7,
            },
            {
                "package": "b",
                "files": 1,
                "statements": 5,
                "covered_statements": 5,
                "coverage_percent": 100.0,
            },
        ]
        assert summary["total"] == {
            "packages": 2,
            "statements": 20,
            "covered_statements": 12,
            "coverage_percent": 60.0,
        }

    def test_no_data_package_is_null(self) -> None:
        summary = build_summary([_package("gen", (0, 1))])
        assert summary["packages"][0]["coverage_percent"] is None
