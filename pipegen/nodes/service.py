"""Nodes that talk to external services."""

from dataclasses import dataclass

from pipegen.dag.node import Node, NodeKind


@dataclass(eq=False)
class CodeCov(Node):
    """Uploads a coverage profile produced by an upstream test node."""

    name: str = "coverage"
    kind: NodeKind = NodeKind.COVERAGE
    input_path: str = ""
    enabled: bool = True
