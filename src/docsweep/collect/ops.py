"""Docstring extraction entry points.

``extract_docstrings`` drives one run: it locates the target module in the
root file, scans its body and every additional file of the module with one
shared store and root scope, and returns the read-only result.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field

from docsweep.collect._internal.scanner import BlockScanner
from docsweep.collect._internal.scope import Scope
from docsweep.collect.store import ExtractedDocs, OutputStore
from docsweep.config.models import ExtractionConfig
from docsweep.core.errors import ExtractionError
from docsweep.core.logging import clear_run_id, get_logger, set_run_id
from docsweep.hooks.builtin import register_builtins
from docsweep.hooks.registry import HookRegistry
from docsweep.tree.nodes import Node, NodeKind

log = get_logger("collect.ops")


@dataclass
class ModuleData:
    """Parsed sources of one target module.

    Attributes:
        module_name: Dotted name of the target module, e.g. ``"Outer.Inner"``.
        root_file: File declaring the module.
        files: Additional files included into the module, in order.
        parsed: Parsed tree for every file above.
    """

    module_name: str
    root_file: str
    files: list[str] = field(default_factory=list)
    parsed: dict[str, Node] = field(default_factory=dict)

    def tree(self, file: str) -> Node:
        try:
            return self.parsed[file]
        except KeyError:
            raise ExtractionError.tree_missing(file) from None


def find_module(tree: Node, module_name: str) -> Node | None:
    """Depth-first search for the declaration of ``module_name``.

    Only the last component of a dotted name is matched.
    """
    target = module_name.rsplit(".", 1)[-1]
    for node in tree.walk():
        if node.kind is NodeKind.MODULE and node.name == target:
            return node
    return None


def extract_docstrings(
    module_data: ModuleData,
    *,
    hooks: HookRegistry | None = None,
    config: ExtractionConfig | None = None,
) -> ExtractedDocs:
    """Extract every docstring and comment of a module.

    Args:
        module_data: Parsed trees of the target module.
        hooks: Interceptor registry. Builtin hooks named in
            ``config.builtin_hooks`` are registered into it before scanning.
        config: Extraction settings. Defaults apply when omitted.

    Returns:
        Docs and metadata keyed by identity.

    Raises:
        ExtractionError: The module is not declared in its root file, or a
            listed file has no parsed tree.
        HookError: A builtin hook name is unknown or already registered.
    """
    config = config or ExtractionConfig()
    hooks = hooks if hooks is not None else HookRegistry()
    module = module_data.module_name

    root_tree = module_data.tree(module_data.root_file)
    declaration = find_module(root_tree, module)
    if declaration is None:
        raise ExtractionError.module_not_found(module, module_data.root_file)

    register_builtins(hooks, module, config.builtin_hooks)

    set_run_id()
    start = time.monotonic()
    try:
        log.info("extraction_started", module=module, files=1 + len(module_data.files))
        scanner = BlockScanner(module=module, store=OutputStore(), hooks=hooks, config=config)
        scope = Scope.root(module)

        # The module's own frame is the root scope, so scan its body rather
        # than the declaration to avoid entering the module twice.
        body = Node(NodeKind.BLOCK, children=declaration.children)
        scanner.scan(scope, module_data.root_file, body)
        for file in module_data.files:
            scanner.scan(scope, file, module_data.tree(file))

        log.info(
            "extraction_finished",
            module=module,
            entries=len(scanner.store),
            documented=scanner.stats.documented,
            comments=scanner.stats.comments,
            claimed=scanner.stats.claimed,
            dropped=scanner.stats.dropped,
            elapsed_ms=round((time.monotonic() - start) * 1000, 1),
        )
        return scanner.store.snapshot()
    finally:
        clear_run_id()
