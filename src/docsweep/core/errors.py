"""docsweep error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Extraction
- 4xxx: Hooks
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Extraction (3xxx)
    MODULE_NOT_FOUND = 3001
    TREE_MISSING = 3002
    TREE_INVALID = 3003

    # Hooks (4xxx)
    HOOK_DUPLICATE_NAME = 4001
    HOOK_UNKNOWN_BUILTIN = 4002

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class DocSweepError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'MODULE_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(DocSweepError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class ExtractionError(DocSweepError):
    """Fatal problems with the trees handed to the extractor."""

    @classmethod
    def module_not_found(cls, module: str, file: str) -> "ExtractionError":
        return cls(
            code=ErrorCode.MODULE_NOT_FOUND,
            message=f"Module '{module}' is not declared in {file}",
            details={"module": module, "file": file},
        )

    @classmethod
    def tree_missing(cls, file: str) -> "ExtractionError":
        return cls(
            code=ErrorCode.TREE_MISSING,
            message=f"No parsed tree available for {file}",
            details={"file": file},
        )

    @classmethod
    def tree_invalid(cls, source: str, reason: str) -> "ExtractionError":
        return cls(
            code=ErrorCode.TREE_INVALID,
            message=f"Invalid tree data in {source}: {reason}",
            details={"source": source, "reason": reason},
        )


class HookError(DocSweepError):
    """Hook chain configuration errors. Raised at registration time."""

    @classmethod
    def duplicate_name(cls, module: str, name: str) -> "HookError":
        return cls(
            code=ErrorCode.HOOK_DUPLICATE_NAME,
            message=f"Hook '{name}' is already registered for module '{module}'",
            details={"module": module, "name": name},
        )

    @classmethod
    def unknown_builtin(cls, name: str, available: list[str]) -> "HookError":
        return cls(
            code=ErrorCode.HOOK_UNKNOWN_BUILTIN,
            message=f"Unknown builtin hook '{name}'",
            details={"name": name, "available": available},
        )


class InternalError(DocSweepError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
