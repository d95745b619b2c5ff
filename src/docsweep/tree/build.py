"""Helpers for building declaration trees in code.

Parsing collaborators and tests use these instead of spelling out ``Node``
keyword arguments for every statement.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from docsweep.tree.nodes import Node, NodeKind, Param


def params(*signature: str) -> list[Param]:
    """Build a parameter list from ``"x"`` / ``"x::T"`` strings."""
    out: list[Param] = []
    for entry in signature:
        name, sep, annotation = entry.partition("::")
        out.append(Param(name=name, annotation=annotation if sep else None))
    return out


def line(number: int) -> Node:
    return Node(NodeKind.LINE, value=number, line=number)


def doc(payload: Any) -> Node:
    return Node(NodeKind.DOC, value=payload)


def comment(text: str) -> Node:
    return Node(NodeKind.COMMENT, value=text)


def symbol(name: str) -> Node:
    return Node(NodeKind.SYMBOL, name=name)


def literal(value: Any) -> Node:
    return Node(NodeKind.LITERAL, value=value)


def block(*children: Node) -> Node:
    return Node(NodeKind.BLOCK, children=list(children))


def module(name: str, *body: Node) -> Node:
    return Node(NodeKind.MODULE, name=name, children=list(body))


def type_decl(name: str, *body: Node, type_params: Iterable[str] = ()) -> Node:
    return Node(NodeKind.TYPE, name=name, type_params=list(type_params), children=list(body))


def function(
    name: str, *signature: str, body: Iterable[Node] = (), text: str | None = None
) -> Node:
    return Node(
        NodeKind.FUNCTION,
        name=name,
        params=params(*signature),
        children=list(body),
        text=text,
    )


def forward_function(name: str) -> Node:
    """``function name end``: declares a function without any method."""
    return Node(NodeKind.FUNCTION, name=name, params=None)


def macro(name: str, *signature: str, body: Iterable[Node] = (), text: str | None = None) -> Node:
    return Node(
        NodeKind.MACRO,
        name=name,
        params=params(*signature),
        children=list(body),
        text=text,
    )


def macrocall(name: str, *args: Node, expansion: Node | None = None) -> Node:
    return Node(NodeKind.MACROCALL, name=name, children=list(args), expansion=expansion)


def call(name: str, *signature: str) -> Node:
    return Node(NodeKind.CALL, name=name, params=params(*signature))


def assign(lhs: Node, rhs: Node) -> Node:
    return Node(NodeKind.ASSIGNMENT, children=[lhs, rhs])


def tuple_of(*names: str) -> Node:
    return Node(NodeKind.TUPLE, children=[symbol(n) for n in names])


def const(inner: Node) -> Node:
    return Node(NodeKind.CONST, children=[inner])


def global_(inner: Node) -> Node:
    return Node(NodeKind.GLOBAL, children=[inner])


def quote(inner: Node) -> Node:
    return Node(NodeKind.QUOTE, children=[inner])


def marker() -> Node:
    return Node(NodeKind.MARKER)


def marked(target: Node) -> Node:
    """The block a capture marker expands to: ``block(marker, target)``."""
    return block(marker(), target)
