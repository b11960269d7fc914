"""covcollect CLI - print per-package coverage of a Go cover profile.

    go test -coverprofile cover.out -coverpkg ./... ./...
    covcollect cover.out
"""

import json
from pathlib import Path
from typing import IO, Any

import click

from covcollect import __version__
from covcollect.config import load_config
from covcollect.core.errors import CovCollectError
from covcollect.core.logging import configure_logging, get_logger
from covcollect.coverage import CoverageCollector, build_summary, parse_profiles, render


class CollectorError(click.ClickException):
    """Fatal error reported as a single line on stderr.

    Text mode prints ``ERROR: <message>``; JSON mode prints the error's
    to_dict() as one compact JSON object.
    """

    def __init__(self, error: CovCollectError, *, as_json: bool = False) -> None:
        super().__init__(error.message)
        self.error = error
        self.as_json = as_json

    def show(self, file: IO[Any] | None = None) -> None:
        if self.as_json:
            click.echo(json.dumps(self.error.to_dict()), file=file, err=True)
        else:
            click.echo(f"ERROR: {self.format_message()}", file=file, err=True)


@click.command()
@click.version_option(version=__version__, prog_name="covcollect")
@click.argument("profiles", nargs=-1, type=click.Path(path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output a JSON summary")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    help="YAML config file (default: ./.covcollect.yaml if present)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(profiles: tuple[Path, ...], as_json: bool, config_path: Path | None, verbose: bool) -> None:
    """Print the statement coverage of every package in a Go cover profile.

    PROFILES is the cover profile written by `go test -coverprofile`. Exactly
    one profile in set mode is supported.
    """
    try:
        config = load_config(config_path)
    except CovCollectError as e:
        raise CollectorError(e, as_json=as_json) from e

    as_json = as_json or config.report.output_format == "json"
    logging_config = config.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(logging_config)
    log = get_logger("covcollect.cli")

    try:
        sources = [parse_profiles(path) for path in profiles]
        collector = CoverageCollector(*sources)
        collector.validate()
        packages = collector.collect_packages()
    except CovCollectError as e:
        log.debug("collection_failed", error=e.error_name, details=e.details)
        raise CollectorError(e, as_json=as_json) from e

    log.debug("report_ready", packages=len(packages), output="json" if as_json else "text")
    if as_json:
        click.echo(json.dumps(build_summary(packages), indent=2))
    else:
        click.echo(render(packages, no_data_label=config.report.no_data_label), nl=False)


if __name__ == "__main__":
    cli()
