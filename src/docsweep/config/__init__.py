"""Config module exports."""

from docsweep.config.loader import DocSweepSettings, load_config
from docsweep.config.models import (
    DocSweepConfig,
    ExtractionConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "DocSweepConfig",
    "DocSweepSettings",
    "ExtractionConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
