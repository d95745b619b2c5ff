"""Structured logging for extraction runs.

Events go through structlog and are rendered by stdlib handlers, one per
configured output. Every event emitted during ``extract_docstrings`` carries
the ``run_id`` of that run so interleaved runs can be told apart.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from docsweep.config.models import LoggingConfig, LogOutputConfig

_CONSOLE_DESTINATIONS = ("stderr", "stdout")

_current_run: ContextVar[str | None] = ContextVar("docsweep_run_id", default=None)

# First file output of the active configuration.
_log_file: Path | None = None


def get_run_id() -> str | None:
    return _current_run.get()


def set_run_id(run_id: str | None = None) -> str:
    """Bind ``run_id`` (or a fresh 12-hex id) to the current context."""
    value = run_id or uuid4().hex[:12]
    _current_run.set(value)
    return value


def clear_run_id() -> None:
    _current_run.set(None)


def get_log_file_path() -> Path | None:
    """Path of the first file output, or None when logging only to the console."""
    return _log_file


def _add_run_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    run_id = get_run_id()
    if run_id:
        event_dict["run_id"] = run_id
    return event_dict


def _level_number(name: str | None, fallback: int) -> int:
    if not name:
        return fallback
    name = name.upper()
    if name == "WARN":
        name = "WARNING"
    number = logging.getLevelName(name)
    return number if isinstance(number, int) else fallback


def _open_handler(destination: str) -> logging.Handler:
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a")


def _formatter_for(
    output: LogOutputConfig,
    pre_chain: list[structlog.types.Processor],
) -> logging.Formatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        to_terminal = output.destination in _CONSOLE_DESTINATIONS and sys.stderr.isatty()
        renderer = structlog.dev.ConsoleRenderer(
            colors=to_terminal, pad_event_to=0, pad_level=False
        )
    return structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain)


def _replace_root_handlers(level: int) -> logging.Logger:
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    root.setLevel(level)
    return root


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    json_format: bool = False,
    level: str = "INFO",
) -> None:
    """Configure structlog and the root stdlib logger.

    Args:
        config: Full logging configuration. When given, ``json_format`` and
            ``level`` are ignored.
        json_format: Render the single stderr output as JSON.
        level: Level of the single stderr output.
    """
    global _log_file
    from docsweep.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(
            level=level,  # type: ignore[arg-type]
            outputs=[LogOutputConfig(format="json" if json_format else "console")],
        )
    base_level = _level_number(config.level, logging.INFO)

    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
        _add_run_id,  # type: ignore[list-item]
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(base_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Loggers are created at import time; caching would pin the first config.
        cache_logger_on_first_use=False,
    )

    root = _replace_root_handlers(base_level)
    _log_file = None
    for output in config.outputs:
        if output.destination not in _CONSOLE_DESTINATIONS and _log_file is None:
            _log_file = Path(output.destination)
        handler = _open_handler(output.destination)
        handler.setLevel(_level_number(output.level, base_level))
        handler.setFormatter(_formatter_for(output, pre_chain))
        root.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger whose events carry ``logger=name`` when a name is given."""
    logger = structlog.get_logger()
    return logger.bind(logger=name) if name else logger  # type: ignore[no-any-return]
