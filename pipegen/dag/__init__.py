"""Pipeline graph model.

Public API:
    Node, NodeKind, RendererScoped, scoped_to, scoped_to_drone
    walk(outputs), validate(outputs), inputs_for(node, renderer)
    describe(outputs), dump_yaml(outputs)
"""

from pipegen.dag.errors import CycleError, GraphConstructionError, GraphError
from pipegen.dag.node import (
    DRONE,
    Node,
    NodeKind,
    RendererScoped,
    scoped_to,
    scoped_to_drone,
)
from pipegen.dag.walk import describe, dump_yaml, inputs_for, validate, walk

__all__ = [
    "DRONE",
    "CycleError",
    "GraphConstructionError",
    "GraphError",
    "Node",
    "NodeKind",
    "RendererScoped",
    "describe",
    "dump_yaml",
    "inputs_for",
    "scoped_to",
    "scoped_to_drone",
    "validate",
    "walk",
]
