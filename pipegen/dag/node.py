"""Pipeline graph nodes.

A node is one unit of pipeline work. Edges are explicit: ``inputs``
holds the upstream nodes this one depends on, so an edge always points
from a later stage to an earlier one. Nodes never copy each other.

Node identity is object identity. ``id`` is a process-unique integer
renderers can use as a stable key; names are for humans and may repeat.
"""

import itertools
from dataclasses import dataclass, field, fields
from enum import StrEnum
from typing import Optional

from pipegen.dag.errors import GraphError

_ids = itertools.count(1)

DRONE = "drone"


class NodeKind(StrEnum):
    """Closed set of node variants renderers dispatch on."""

    TOOLCHAIN = "toolchain"
    ANALYZER = "analyzer"
    LINT = "lint"
    UNIT_TESTS = "unit_tests"
    COVERAGE = "coverage"
    BUILD = "build"
    IMAGE = "image"
    INFRASTRUCTURE = "infrastructure"
    RENDERER_SCOPED = "renderer_scoped"


_BASE_FIELDS = {"name", "kind", "inputs", "id"}


@dataclass(eq=False)
class Node:
    """A unit of pipeline work with explicit upstream edges."""

    name: str
    kind: NodeKind
    inputs: list["Node"] = field(default_factory=list, repr=False)
    id: int = field(default_factory=lambda: next(_ids), init=False)

    def add_input(self, *nodes: "Node") -> None:
        """Append upstream dependencies, ignoring ones already present."""
        for node in nodes:
            if not isinstance(node, Node):
                raise GraphError(f"{self.name}: input {node!r} is not a Node")
            if node is self:
                raise GraphError(f"{self.name}: a node cannot depend on itself")
            if not any(node is existing for existing in self.inputs):
                self.inputs.append(node)

    @property
    def produces_image(self) -> bool:
        return self.kind == NodeKind.IMAGE

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.value,
            "inputs": [node.id for node in self.inputs],
        }
        for f in fields(self):
            if f.name in _BASE_FIELDS:
                continue
            value = getattr(self, f.name)
            data[f.name] = value.id if isinstance(value, Node) else value
        return data


@dataclass(eq=False)
class RendererScoped(Node):
    """A view of ``target`` that only one renderer follows.

    The only input is ``target``. Renderers other than ``renderer`` drop
    this node from the inputs they see, so depending on it never fails a
    graph rendered for a different pipeline.
    """

    kind: NodeKind = NodeKind.RENDERER_SCOPED
    renderer: str = ""
    target: Optional[Node] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.target is None or not self.renderer:
            raise GraphError("RendererScoped needs both a target and a renderer")
        self.add_input(self.target)


def scoped_to(renderer: str, node: Node) -> RendererScoped:
    return RendererScoped(name=node.name, renderer=renderer, target=node)


def scoped_to_drone(node: Node) -> RendererScoped:
    return scoped_to(DRONE, node)
