"""Traversal and validation of pipeline graphs.

Renderers start from the output nodes a builder returns and follow
``inputs`` edges back to the sources. walk() yields every reachable node
exactly once, upstream before downstream, and refuses cyclic graphs.
"""

import logging
from typing import Iterable

import yaml

from pipegen.dag.errors import CycleError, GraphError
from pipegen.dag.node import Node, NodeKind

logger = logging.getLogger(__name__)

_END = object()


def walk(outputs: Iterable[Node]) -> list[Node]:
    """Return every node reachable from ``outputs`` in dependency order.

    Depth-first post-order: a node appears after all of its inputs. Ties
    follow the order of ``outputs`` and of each node's ``inputs``.

    Raises:
        CycleError: If an edge leads back to a node on the current path.
        GraphError: If an input is not a Node.
    """
    order: list[Node] = []
    done: set[int] = set()

    for output in outputs:
        _check_input(output, None)
        if id(output) in done:
            continue

        # (node, remaining inputs) pairs; the nodes on the stack are the
        # current path from ``output``.
        stack = [(output, iter(output.inputs))]
        on_path = {id(output)}
        while stack:
            node, pending = stack[-1]
            upstream = next(pending, _END)
            if upstream is _END:
                stack.pop()
                on_path.discard(id(node))
                done.add(id(node))
                order.append(node)
                continue

            _check_input(upstream, node)
            if id(upstream) in done:
                continue
            if id(upstream) in on_path:
                path = [n for n, _ in stack]
                index = next(i for i, n in enumerate(path) if n is upstream)
                raise CycleError([n.name for n in path[index:]] + [upstream.name])

            stack.append((upstream, iter(upstream.inputs)))
            on_path.add(id(upstream))
    return order


def _check_input(node, parent) -> None:
    if not isinstance(node, Node):
        owner = parent.name if parent is not None else "<outputs>"
        raise GraphError(f"{owner}: dangling input {node!r}")


def validate(outputs: Iterable[Node]) -> list[Node]:
    """Walk the graph and check that node identities are unique.

    Returns the nodes in dependency order so callers can reuse the walk.
    """
    nodes = walk(outputs)
    seen: dict[int, Node] = {}
    for node in nodes:
        other = seen.setdefault(node.id, node)
        if other is not node:
            raise GraphError(f"Nodes {other.name!r} and {node.name!r} share id {node.id}")
    logger.debug("Validated pipeline graph: %d nodes", len(nodes))
    return nodes


def inputs_for(node: Node, renderer: str) -> list[Node]:
    """Return ``node.inputs`` as seen by ``renderer``.

    Inputs scoped to a different renderer are dropped.
    """
    return [
        upstream
        for upstream in node.inputs
        if upstream.kind != NodeKind.RENDERER_SCOPED
        or getattr(upstream, "renderer", None) == renderer
    ]


def describe(outputs: Iterable[Node]) -> list[dict]:
    return [node.to_dict() for node in walk(outputs)]


def dump_yaml(outputs: Iterable[Node]) -> str:
    """Render the graph as YAML, one entry per node in dependency order."""
    return yaml.safe_dump({"nodes": describe(outputs)}, sort_keys=False)
