"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and gives every test a quiet, freshly configured logging setup.
"""

import logging
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

# Insert local src directory at the beginning of sys.path
# This ensures that the local covcollect package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Keep structlog at WARNING during tests and drop handlers afterwards."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def write_profile(tmp_path: Path):
    """Write cover profile text to a file and return its path."""

    def _write(content: str, name: str = "cover.out") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write
