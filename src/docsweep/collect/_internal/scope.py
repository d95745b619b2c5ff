"""Lexical scope tracking for tree traversal.

A ``Scope`` is one frame of the traversal stack. Frames are immutable:
entering a block-like node derives a new frame and the parent frame is left
untouched, so leaving a block is just dropping the derived frame.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from docsweep.config.constants import TYPE_SCOPE_FLAG
from docsweep.tree.nodes import Node, NodeKind


@dataclass(frozen=True, slots=True)
class Scope:
    """Module path and type-parameter bindings visible at one nesting level."""

    module_path: tuple[str, ...] = ()
    type_params: frozenset[str] = field(default_factory=frozenset)
    flags: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def root(cls, module_name: str) -> Scope:
        """Seed frame for a dotted module name such as ``"Outer.Inner"``."""
        return cls(module_path=tuple(part for part in module_name.split(".") if part))

    @property
    def in_type(self) -> bool:
        return TYPE_SCOPE_FLAG in self.flags


def enter(scope: Scope, node: Node) -> Scope:
    """Return the frame that applies to the children of ``node``."""
    if node.kind is NodeKind.MODULE and node.name:
        # A nested module is a fresh namespace: outer type parameters and
        # type-body flags do not leak into it.
        return Scope(module_path=(*scope.module_path, node.name))
    if node.kind is NodeKind.TYPE:
        return Scope(
            module_path=scope.module_path,
            type_params=scope.type_params | frozenset(node.type_params),
            flags=scope.flags | {TYPE_SCOPE_FLAG},
        )
    return scope
