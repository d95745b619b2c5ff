"""Identities and metadata for extracted docstrings.

Identities are structural: two identities are equal when their variant and
every field match, never by object identity. They key the output store.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple, Union

from docsweep.collect._internal.scope import Scope
from docsweep.tree.nodes import Param


class Category(str, Enum):
    """Coarse classification of a documented declaration."""

    MODULE = "module"
    TYPE = "type"
    FUNCTION = "function"
    METHOD = "method"
    MACRO = "macro"
    GLOBAL = "global"
    COMMENT = "comment"
    GENERIC = "generic"


class SourceLocation(NamedTuple):
    line: int
    file: str


@dataclass(frozen=True, slots=True)
class ParamSlot:
    """One position of a signature's parameter shape.

    ``type_var`` is set when the annotation names a type parameter bound by
    the enclosing scope (e.g. ``x::T`` inside ``struct Point{T}``).
    """

    name: str
    annotation: str | None = None
    type_var: bool = False


@dataclass(frozen=True, slots=True)
class ModuleId:
    path: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class BindingId:
    name: str
    scope: Scope


@dataclass(frozen=True, slots=True)
class SignatureId:
    name: str
    scope: Scope
    params: tuple[ParamSlot, ...] = ()


@dataclass(frozen=True, slots=True)
class MacroId:
    name: str
    scope: Scope


@dataclass(frozen=True, slots=True)
class CommentAnchor:
    file: str
    line: int


Identity = Union[ModuleId, BindingId, SignatureId, MacroId, CommentAnchor]
IDENTITY_TYPES: tuple[type, ...] = (ModuleId, BindingId, SignatureId, MacroId, CommentAnchor)

# What resolution can produce: one identity, a group sharing one docstring,
# or several such groups.
IdentityTarget = Union[Identity, frozenset, tuple]


def is_identity_target(value: Any) -> bool:
    """True for an identity, a set of identities or a tuple of such sets."""
    if isinstance(value, IDENTITY_TYPES):
        return True
    if isinstance(value, frozenset):
        return bool(value) and all(isinstance(v, IDENTITY_TYPES) for v in value)
    if isinstance(value, tuple):
        return bool(value) and all(
            isinstance(group, frozenset) and is_identity_target(group) for group in value
        )
    return False


def iter_identities(target: IdentityTarget) -> list[Identity]:
    """Flatten a resolution result into its member identities."""
    if isinstance(target, tuple):
        return [ident for group in target for ident in group]
    if isinstance(target, frozenset):
        return list(target)
    return [target]


@dataclass
class Metadata:
    """Metadata recorded alongside a raw docstring."""

    source: SourceLocation
    category: Category
    signature: tuple[Param, ...] | None = None
    code: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Mapping form: ``source`` and ``category`` always present."""
        out: dict[str, Any] = {
            "source": (self.source.line, self.source.file),
            "category": self.category.value,
        }
        if self.signature is not None:
            out["signature"] = self.signature
        if self.code is not None:
            out["code"] = self.code
        return out
