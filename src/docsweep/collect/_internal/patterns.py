"""Window patterns recognized by the block scanner.

A window is three consecutive siblings. Two shapes produce output:

    (line, comment, line)   a standalone comment: nothing follows it
    (doc, line, target)     a docstring attached to the following statement
"""

from __future__ import annotations

from collections.abc import Sequence

from docsweep.tree.nodes import Node, NodeKind


def is_location(node: Node) -> bool:
    return node.kind is NodeKind.LINE and isinstance(node.value, int)


def is_comment_block(window: Sequence[Node]) -> bool:
    if len(window) != 3:
        return False
    location, comment, following = window
    return (
        is_location(location)
        and comment.kind is NodeKind.COMMENT
        and is_location(following)
    )


def is_doc_block(window: Sequence[Node]) -> bool:
    if len(window) != 3:
        return False
    docstring, location, target = window
    return docstring.kind is NodeKind.DOC and is_location(location) and not is_location(target)


def unwrap(node: Node) -> Node | None:
    """Strip one quote layer and one macro call around a declaration.

    Returns ``None`` when nothing documentable remains, including when the
    unwrapped form is itself another macro call.
    """
    if node.kind is NodeKind.QUOTE:
        inner = node.wrapped
        if inner is None:
            return None
        node = inner
    if node.kind is NodeKind.MACROCALL:
        inner = node.wrapped
        if inner is None or inner.kind is NodeKind.MACROCALL:
            return None
        node = inner
    return node
