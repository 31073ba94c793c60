"""Concrete pipeline nodes and the factories that build them."""

from pipegen.nodes.factories import DefaultNodeFactories, NodeFactories

__all__ = ["DefaultNodeFactories", "NodeFactories"]
