"""Interceptors shipped with docsweep."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from docsweep.core.errors import HookError
from docsweep.hooks.registry import HookRegistry, Interceptor
from docsweep.tree.nodes import Node, NodeKind


def track(trace: list[tuple[Any, Any]] | None = None) -> Interceptor:
    """Debugging interceptor that records every raw pair it sees.

    Never claims, so classification carries on as if it were not there.
    """
    sink: list[tuple[Any, Any]] = trace if trace is not None else []

    def _track(doc: Any, decl: Any) -> tuple[bool, Any, Any]:
        sink.append((doc, decl))
        return False, doc, decl

    _track.trace = sink  # type: ignore[attr-defined]
    return _track


def _is_marked(node: Node) -> bool:
    return (
        node.kind is NodeKind.BLOCK
        and len(node.children) == 2
        and node.children[0].kind is NodeKind.MARKER
    )


def _collect_marked(node: Node, found: list[Node]) -> None:
    if _is_marked(node):
        found.append(node.children[1])
        return
    for child in node.children:
        _collect_marked(child, found)


def capture_marked(doc: Any, decl: Any) -> tuple[bool, Any, Any]:
    """Redirect a docstring onto the forms a macro marked as documentable.

    Macro authors wrap generated definitions as ``block(marker, definition)``.
    The marked definitions, searched for in the macro's expansion when there
    is one, replace the declaration: a single one directly, several as a
    ``block`` group. Never claims, so default classification runs on the
    rewritten declaration.
    """
    if not isinstance(decl, Node):
        return False, doc, decl
    found: list[Node] = []
    _collect_marked(decl.expansion if decl.expansion is not None else decl, found)
    if not found:
        return False, doc, decl
    if len(found) == 1:
        return False, doc, found[0]
    return False, doc, Node(NodeKind.BLOCK, children=found)


BUILTIN_HOOKS: dict[str, Interceptor] = {
    "capture": capture_marked,
}


def register_builtins(
    registry: HookRegistry,
    module: str,
    names: Iterable[str],
    *,
    trace: list[tuple[Any, Any]] | None = None,
) -> None:
    """Register builtin interceptors by name for ``module``.

    ``track`` appends to ``trace`` when given.
    """
    for name in names:
        if name == "track":
            registry.register(module, track(trace), name="track")
        elif name in BUILTIN_HOOKS:
            registry.register(module, BUILTIN_HOOKS[name], name=name)
        else:
            raise HookError.unknown_builtin(name, sorted([*BUILTIN_HOOKS, "track"]))
