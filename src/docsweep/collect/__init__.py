"""Docstring collection: scanning, identity resolution and storage."""

from docsweep.collect._internal.scope import Scope, enter
from docsweep.collect.models import (
    BindingId,
    Category,
    CommentAnchor,
    Identity,
    MacroId,
    Metadata,
    ModuleId,
    ParamSlot,
    SignatureId,
    SourceLocation,
)
from docsweep.collect.ops import ModuleData, extract_docstrings, find_module
from docsweep.collect.store import ExtractedDocs, OutputStore

__all__ = [
    "BindingId",
    "Category",
    "CommentAnchor",
    "ExtractedDocs",
    "Identity",
    "MacroId",
    "Metadata",
    "ModuleData",
    "ModuleId",
    "OutputStore",
    "ParamSlot",
    "Scope",
    "SignatureId",
    "SourceLocation",
    "enter",
    "extract_docstrings",
    "find_module",
]
