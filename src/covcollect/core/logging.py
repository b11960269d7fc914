"""structlog setup for the covcollect command.

Events go through stdlib logging so each configured output (stderr, stdout
or a file) gets its own level and renderer.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from covcollect.config.models import LoggingConfig, LogOutputConfig

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
]


def configure_logging(config: LoggingConfig | None = None, *, level: str = "WARNING") -> None:
    """Route structlog events to the outputs in ``config``.

    Replaces any handlers already on the root logger, so calling it again
    reconfigures rather than duplicates output. Without ``config`` a single
    console output on stderr at ``level`` is used.
    """
    from covcollect.config.models import LoggingConfig

    config = config or LoggingConfig(level=level)  # type: ignore[arg-type]
    threshold = logging.getLevelName(config.level)

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(threshold),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # reconfigure() must take effect on loggers handed out earlier
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(threshold)
    for output in config.outputs:
        root.addHandler(_output_handler(output, default_level=config.level))


def _output_handler(output: LogOutputConfig, *, default_level: str) -> logging.Handler:
    stream = {"stderr": sys.stderr, "stdout": sys.stdout}.get(output.destination)
    if stream is None:
        log_path = Path(output.destination)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, mode="a")
    else:
        handler = logging.StreamHandler(stream)

    if output.format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=stream is not None and stream.isatty(),
            pad_event_to=0,
            pad_level=False,
        )
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=_SHARED_PROCESSORS)
    )
    handler.setLevel(logging.getLevelName(output.level or default_level))
    return handler


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger for ``name``; call after configure_logging() since binding fixes the config."""
    logger = structlog.get_logger()
    return logger.bind(logger=name) if name else logger  # type: ignore[no-any-return]
