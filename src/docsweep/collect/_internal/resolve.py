"""Classification and identity resolution for documented declarations.

Classification is a two-pass refinement: ``classify`` makes a first guess
from the node kind, ``resolve_identity`` works out what the declaration
names, and ``recheck`` corrects the guess when the identity shows a
different shape (an assignment that defines a method, for instance).
"""

from __future__ import annotations

from collections.abc import Iterable

from docsweep.collect._internal.patterns import is_location, unwrap
from docsweep.collect._internal.scope import Scope, enter
from docsweep.collect.models import (
    BindingId,
    Category,
    Identity,
    IdentityTarget,
    MacroId,
    Metadata,
    ModuleId,
    ParamSlot,
    SignatureId,
    iter_identities,
)
from docsweep.tree.nodes import Node, NodeKind, Param

_GLOBAL_KINDS = (NodeKind.ASSIGNMENT, NodeKind.CONST, NodeKind.GLOBAL)


def classify(scope: Scope, node: Node) -> Category:
    """First-pass category from the node kind."""
    if node.kind is NodeKind.MODULE:
        return Category.MODULE
    if node.kind is NodeKind.TYPE:
        return Category.TYPE
    if node.kind is NodeKind.FUNCTION:
        return Category.METHOD if scope.in_type else Category.FUNCTION
    if node.kind is NodeKind.MACRO:
        return Category.MACRO
    if node.kind in _GLOBAL_KINDS:
        return Category.GLOBAL
    return Category.GENERIC


def param_shape(scope: Scope, params: Iterable[Param]) -> tuple[ParamSlot, ...]:
    return tuple(
        ParamSlot(
            name=p.name,
            annotation=p.annotation,
            type_var=p.annotation is not None and p.annotation in scope.type_params,
        )
        for p in params
    )


def resolve_identity(scope: Scope, node: Node) -> IdentityTarget | None:
    """Work out what ``node`` names.

    Returns a single identity, a ``frozenset`` when one declaration binds
    several names at once, a ``tuple`` of frozensets for a group of
    declarations, or ``None`` when nothing nameable is found.
    """
    kind = node.kind
    if kind is NodeKind.MODULE:
        return ModuleId(enter(scope, node).module_path) if node.name else None
    if kind is NodeKind.TYPE or kind is NodeKind.SYMBOL:
        return BindingId(node.name, scope) if node.name else None
    if kind is NodeKind.FUNCTION:
        if not node.name:
            return None
        if node.params is None:
            return BindingId(node.name, scope)
        return SignatureId(node.name, scope, param_shape(scope, node.params))
    if kind is NodeKind.CALL:
        if not node.name:
            return None
        return SignatureId(node.name, scope, param_shape(scope, node.params or ()))
    if kind is NodeKind.MACRO:
        return MacroId(node.name, scope) if node.name else None
    if kind is NodeKind.CONST or kind is NodeKind.GLOBAL:
        inner = node.wrapped
        return resolve_identity(scope, inner) if inner is not None else None
    if kind is NodeKind.ASSIGNMENT:
        return _resolve_assignment(scope, node)
    if kind is NodeKind.BLOCK:
        return _resolve_group(scope, node)
    return None


def _lhs_targets(scope: Scope, lhs: Node) -> list[Identity]:
    if lhs.kind is NodeKind.SYMBOL and lhs.name:
        return [BindingId(lhs.name, scope)]
    if lhs.kind is NodeKind.CALL and lhs.name:
        return [SignatureId(lhs.name, scope, param_shape(scope, lhs.params or ()))]
    if lhs.kind is NodeKind.TUPLE:
        return [
            BindingId(c.name, scope)
            for c in lhs.children
            if c.kind is NodeKind.SYMBOL and c.name
        ]
    return []


def _resolve_assignment(scope: Scope, node: Node) -> IdentityTarget | None:
    # a = b = 1 nests as assignment(a, assignment(b, 1)): every lhs is a target.
    targets: list[Identity] = []
    current = node
    while current.kind is NodeKind.ASSIGNMENT and len(current.children) == 2:
        lhs, current = current.children
        targets.extend(_lhs_targets(scope, lhs))
    unique = list(dict.fromkeys(targets))
    if not unique:
        return None
    if len(unique) == 1:
        return unique[0]
    return frozenset(unique)


def _resolve_group(scope: Scope, node: Node) -> tuple[frozenset, ...] | None:
    groups: list[frozenset] = []
    for child in node.children:
        if is_location(child):
            continue
        target_node = unwrap(child)
        if target_node is None:
            continue
        target = resolve_identity(scope, target_node)
        if target is None:
            continue
        if isinstance(target, tuple):
            groups.extend(target)
        elif isinstance(target, frozenset):
            groups.append(target)
        else:
            groups.append(frozenset({target}))
    return tuple(groups) if groups else None


def recheck(target: IdentityTarget, category: Category, scope: Scope) -> Category:
    """Correct a first-pass category once the identity is known."""
    if category not in (Category.GLOBAL, Category.GENERIC):
        return category
    identities = iter_identities(target)
    if identities and all(isinstance(i, SignatureId) for i in identities):
        return Category.METHOD if scope.in_type else Category.FUNCTION
    return category


def is_method_definition(node: Node) -> bool:
    """A definition with a signature, as opposed to ``function f end``."""
    if node.kind is NodeKind.FUNCTION:
        return node.params is not None
    if node.kind is NodeKind.ASSIGNMENT and node.children:
        return node.children[0].kind is NodeKind.CALL
    return False


def postprocess(category: Category, metadata: Metadata, node: Node) -> Metadata:
    """Attach category-specific metadata for macros and methods."""
    if category is Category.MACRO:
        metadata.signature = tuple(node.params or ())
        metadata.code = node
    elif category is Category.METHOD and is_method_definition(node):
        metadata.code = node
    return metadata
