"""Ecosystem-independent pipeline nodes."""

from dataclasses import dataclass

from pipegen.dag.node import Node, NodeKind


@dataclass(eq=False)
class Lint(Node):
    """Single user-facing lint target; satisfied when every analyzer passes."""

    name: str = "lint"
    kind: NodeKind = NodeKind.LINT


@dataclass(eq=False)
class Image(Node):
    """Container image for one command."""

    kind: NodeKind = NodeKind.IMAGE
    command: str = ""
    base: str = "scratch"
    repository: str = ""
    entrypoint: str = ""


@dataclass(eq=False)
class FHS(Node):
    """Filesystem hierarchy skeleton copied into an image."""

    name: str = "image-fhs"
    kind: NodeKind = NodeKind.INFRASTRUCTURE


@dataclass(eq=False)
class CACerts(Node):
    """CA certificate bundle copied into an image."""

    name: str = "image-ca-certificates"
    kind: NodeKind = NodeKind.INFRASTRUCTURE
