"""Loading serialized declaration trees.

Parsing collaborators can hand trees over as JSON or YAML documents. The
payload is validated with pydantic before being converted into ``Node``
objects so that malformed input fails once, up front, with a typed error.

Manifest layout::

    module: Geometry
    root_file: src/Geometry.jl
    files: [src/points.jl]
    trees:
      src/Geometry.jl: {kind: block, children: [...]}
      src/points.jl: {kind: block, children: [...]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from docsweep.core.errors import ExtractionError
from docsweep.core.logging import get_logger
from docsweep.tree.nodes import Node, NodeKind, Param

if TYPE_CHECKING:
    from docsweep.collect.ops import ModuleData

log = get_logger("tree.loader")


class ParamModel(BaseModel):
    name: str
    annotation: str | None = None


class NodeModel(BaseModel):
    """Serialized form of a ``Node``."""

    model_config = ConfigDict(extra="ignore")

    kind: str
    children: list[NodeModel] = Field(default_factory=list)
    name: str | None = None
    params: list[ParamModel] | None = None
    type_params: list[str] = Field(default_factory=list)
    value: Any = None
    line: int | None = None
    text: str | None = None
    expansion: NodeModel | None = None

    def to_node(self) -> Node:
        kind = NodeKind.parse(self.kind)
        if kind is NodeKind.OTHER and self.kind.lower() != NodeKind.OTHER.value:
            log.debug("unknown_node_kind", kind=self.kind, line=self.line)
        return Node(
            kind=kind,
            children=[child.to_node() for child in self.children],
            name=self.name,
            params=(
                None
                if self.params is None
                else [Param(p.name, p.annotation) for p in self.params]
            ),
            type_params=list(self.type_params),
            value=self.value,
            line=self.line,
            text=self.text,
            expansion=self.expansion.to_node() if self.expansion is not None else None,
        )


class ModuleDataModel(BaseModel):
    """Serialized module data: the target module and its parsed files."""

    module: str
    root_file: str
    files: list[str] = Field(default_factory=list)
    trees: dict[str, NodeModel]


def _read_document(path: Path) -> Any:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ExtractionError.tree_invalid(str(path), str(e)) from e
    try:
        if path.suffix in (".yaml", ".yml"):
            return yaml.safe_load(raw)
        return json.loads(raw)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ExtractionError.tree_invalid(str(path), str(e)) from e


def parse_tree(data: Any, *, source: str = "<memory>") -> Node:
    """Validate a serialized tree and convert it to nodes."""
    try:
        model = NodeModel.model_validate(data)
    except ValidationError as e:
        raise ExtractionError.tree_invalid(source, str(e.errors()[0]["msg"])) from e
    return model.to_node()


def load_tree(path: Path) -> Node:
    """Load a single serialized tree from a JSON or YAML file."""
    return parse_tree(_read_document(path), source=str(path))


def load_module_data(path: Path) -> ModuleData:
    """Load a module manifest with all of its parsed trees."""
    from docsweep.collect.ops import ModuleData

    data = _read_document(path)
    try:
        model = ModuleDataModel.model_validate(data)
    except ValidationError as e:
        err = e.errors()[0]
        where = ".".join(str(loc) for loc in err["loc"])
        raise ExtractionError.tree_invalid(str(path), f"{where}: {err['msg']}") from e

    parsed = {file: tree.to_node() for file, tree in model.trees.items()}
    log.debug("module_data_loaded", module=model.module, files=len(parsed))
    return ModuleData(
        module_name=model.module,
        root_file=model.root_file,
        files=list(model.files),
        parsed=parsed,
    )
