"""Graph builders: turn a descriptor plus upstream nodes into a subgraph.

Public API:
    build_go(descriptor, inputs, factories) -> list[Node]
"""

from pipegen.builder.go import build_go

__all__ = ["build_go"]
