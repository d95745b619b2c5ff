"""Declaration tree model and loaders."""

from docsweep.tree.loader import load_module_data, load_tree, parse_tree
from docsweep.tree.nodes import Node, NodeKind, Param

__all__ = [
    "Node",
    "NodeKind",
    "Param",
    "load_module_data",
    "load_tree",
    "parse_tree",
]
