"""Core module exports."""

from docsweep.core.errors import (
    ConfigError,
    DocSweepError,
    ErrorCode,
    ExtractionError,
    HookError,
    InternalError,
)
from docsweep.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "DocSweepError",
    "ConfigError",
    "ErrorCode",
    "ExtractionError",
    "HookError",
    "InternalError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
