"""covcollect CLI."""

from covcollect.cli.main import cli

__all__ = ["cli"]
