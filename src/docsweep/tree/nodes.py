"""Declaration tree node model.

Trees are produced by a parsing collaborator and handed to the extractor
already built. The model is a closed set of node kinds; anything a parser
emits that has no counterpart here is loaded as ``NodeKind.OTHER`` and is
skipped by traversal.

Kind-specific fields:
    line        value: line number of the following statement
    doc         value: documentation payload
    comment     value: standalone comment text
    module      name, children = body
    type        name, type_params, children = body
    function    name, params (None for forward declarations), children = body
    macro       name, params, children = body
    macrocall   name, children[-1] = wrapped form, expansion = expanded tree
    assignment  children = [lhs, rhs]
    const       children = [assignment | symbol]
    global      children = [assignment | symbol]
    call        name, params
    symbol      name
    tuple       children = symbols
    quote       children = [quoted form]
    marker      (no fields) capture marker left by macro authors
    literal     value
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    """Closed set of node kinds understood by the extractor."""

    BLOCK = "block"
    MODULE = "module"
    TYPE = "type"
    FUNCTION = "function"
    MACRO = "macro"
    MACROCALL = "macrocall"
    ASSIGNMENT = "assignment"
    CONST = "const"
    GLOBAL = "global"
    CALL = "call"
    SYMBOL = "symbol"
    TUPLE = "tuple"
    QUOTE = "quote"
    LINE = "line"
    DOC = "doc"
    COMMENT = "comment"
    MARKER = "marker"
    LITERAL = "literal"
    OTHER = "other"

    @classmethod
    def parse(cls, raw: str) -> NodeKind:
        """Map a serialized kind tag to a kind, unknown tags become OTHER."""
        try:
            return cls(raw.lower())
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True, slots=True)
class Param:
    """A single signature parameter, ``x`` or ``x::T``."""

    name: str
    annotation: str | None = None

    def __str__(self) -> str:
        if self.annotation is None:
            return self.name
        return f"{self.name}::{self.annotation}"


@dataclass
class Node:
    """A declaration tree node."""

    kind: NodeKind
    children: list[Node] = field(default_factory=list)
    name: str | None = None
    params: list[Param] | None = None
    type_params: list[str] = field(default_factory=list)
    value: Any = None
    line: int | None = None
    text: str | None = None
    expansion: Node | None = None

    @property
    def wrapped(self) -> Node | None:
        """The form wrapped by a macrocall, quote, const or global node."""
        return self.children[-1] if self.children else None

    def walk(self) -> list[Node]:
        """Depth-first pre-order list of this node and its descendants."""
        out: list[Node] = []
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            out.append(node)
            stack.extend(reversed(node.children))
        return out
