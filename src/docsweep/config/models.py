"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (DOCSWEEP__SECTION__KEY)
3. Project YAML (.docsweep/config.yaml)
4. Global YAML (~/.config/docsweep/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    DOCSWEEP__<SECTION>__<KEY>=<VALUE>

Examples:
    DOCSWEEP__LOGGING__LEVEL=DEBUG
    DOCSWEEP__EXTRACTION__RESOLVE_EXTERNAL_DOCS=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
BuiltinHook = Literal["track", "capture"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        DOCSWEEP__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every dropped or overwritten docstring.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ExtractionConfig(BaseModel):
    """Docstring extraction configuration.

    Env vars:
        DOCSWEEP__EXTRACTION__RESOLVE_EXTERNAL_DOCS: Load docs that name a file
        DOCSWEEP__EXTRACTION__BUILTIN_HOOKS: JSON list of builtin hooks to register
    """

    resolve_external_docs: bool = Field(
        default=True,
        description="Replace a docstring that names an existing file (relative to the "
        "declaring source file) with that file's content.",
    )
    external_doc_suffixes: list[str] = Field(
        default_factory=lambda: [".md"],
        description="File suffixes a docstring must end with to be treated as external.",
    )
    builtin_hooks: list[BuiltinHook] = Field(
        default_factory=list,
        description="Builtin hooks registered for the target module before extraction. "
        "'capture' enables marker capture in macro-generated declarations; "
        "'track' records every raw pair seen in the run trace.",
    )

    @field_validator("external_doc_suffixes")
    @classmethod
    def validate_suffixes(cls, v: list[str]) -> list[str]:
        for suffix in v:
            if not suffix.startswith("."):
                raise ValueError(f"Suffix must start with '.': {suffix}")
        return v


class DocSweepConfig(BaseModel):
    """Root configuration for docsweep."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
