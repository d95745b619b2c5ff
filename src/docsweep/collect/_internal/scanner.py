"""Recursive block scanner.

Walks a declaration tree looking at every run of three consecutive siblings
and records the docstrings and standalone comments it recognizes. Each
docstring is offered to the hook chain first and classified only if no
interceptor claims it. Standalone comments are stored as found.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from docsweep.collect._internal.docs import find_external
from docsweep.collect._internal.patterns import is_comment_block, is_doc_block, unwrap
from docsweep.collect._internal.resolve import (
    classify,
    postprocess,
    recheck,
    resolve_identity,
)
from docsweep.collect._internal.scope import Scope, enter
from docsweep.collect.models import (
    Category,
    CommentAnchor,
    IdentityTarget,
    Metadata,
    SourceLocation,
    is_identity_target,
)
from docsweep.collect.store import OutputStore
from docsweep.config.constants import DUMMY_LINE, WINDOW_WIDTH
from docsweep.config.models import ExtractionConfig
from docsweep.core.logging import get_logger
from docsweep.hooks.registry import HookRegistry
from docsweep.tree.nodes import Node, NodeKind

log = get_logger("collect.scanner")

_TRAVERSABLE = frozenset(
    {
        NodeKind.BLOCK,
        NodeKind.MODULE,
        NodeKind.TYPE,
        NodeKind.MACROCALL,
        NodeKind.QUOTE,
    }
)


def is_traversable(node: Any) -> bool:
    """Only block-like statements can hold documented declarations."""
    return isinstance(node, Node) and node.kind in _TRAVERSABLE


@dataclass
class ScanStats:
    documented: int = 0
    comments: int = 0
    claimed: int = 0
    dropped: int = 0


@dataclass
class BlockScanner:
    """Scans the trees of one target module into a shared store."""

    module: str
    store: OutputStore
    hooks: HookRegistry
    config: ExtractionConfig = field(default_factory=ExtractionConfig)
    stats: ScanStats = field(default_factory=ScanStats)

    def scan(self, scope: Scope, file: str, node: Any) -> OutputStore:
        if not is_traversable(node):
            return self.store
        inner = enter(scope, node)
        children = node.children

        for i in range(len(children) - (WINDOW_WIDTH - 1)):
            window = children[i : i + WINDOW_WIDTH]
            if is_comment_block(window):
                self._record_comment(file, window)
            elif is_doc_block(window):
                self._record_docs(inner, file, window)
            self.scan(inner, file, window[0])

        # Windows lead with every child except the last two.
        for child in children[max(len(children) - (WINDOW_WIDTH - 1), 0) :]:
            self.scan(inner, file, child)

        # A comment closing the block has no location marker after it.
        if len(children) >= 2:
            tail = (children[-2], children[-1], Node(NodeKind.LINE, value=DUMMY_LINE))
            if is_comment_block(tail):
                self._record_comment(file, tail)

        return self.store

    def _evaluate(self, payload: Any, file: str) -> Any:
        if self.config.resolve_external_docs:
            return find_external(payload, file, self.config.external_doc_suffixes)
        return payload

    def _record_comment(self, file: str, window: Sequence[Node]) -> None:
        location, comment, _ = window
        source = SourceLocation(location.value, file)
        doc = self._evaluate(comment.value, file)

        # A bare comment declares nothing, so interceptors never see it.
        self.store.put(
            CommentAnchor(file, source.line),
            doc,
            Metadata(source=source, category=Category.COMMENT),
        )
        self.stats.comments += 1

    def _record_docs(self, scope: Scope, file: str, window: Sequence[Node]) -> None:
        docstring, location, target = window
        source = SourceLocation(location.value, file)
        doc = self._evaluate(docstring.value, file)

        claimed, doc, decl = self.hooks.intercept(self.module, doc, target)
        if claimed:
            self._record_claimed(scope, source, doc, decl)
            return

        decl = unwrap(decl) if isinstance(decl, Node) else None
        if decl is None:
            self._drop(source, "not_documentable")
            return

        category = classify(scope, decl)
        identity = resolve_identity(scope, decl)
        if identity is None:
            self._drop(source, "no_identity")
            return
        category = recheck(identity, category, scope)

        metadata = postprocess(category, Metadata(source=source, category=category), decl)
        self.store.put(identity, doc, metadata)
        self.stats.documented += 1

    def _record_claimed(self, scope: Scope, source: SourceLocation, doc: Any, decl: Any) -> None:
        identity: IdentityTarget | None
        if is_identity_target(decl):
            identity = decl
        elif isinstance(decl, Node):
            unwrapped = unwrap(decl)
            identity = resolve_identity(scope, unwrapped) if unwrapped is not None else None
        else:
            identity = None
        if identity is None:
            self._drop(source, "claimed_without_identity")
            return
        self.store.put(identity, doc, Metadata(source=source, category=Category.GENERIC))
        self.stats.claimed += 1

    def _drop(self, source: SourceLocation, reason: str) -> None:
        self.stats.dropped += 1
        log.debug("docstring_dropped", reason=reason, line=source.line, file=source.file)
