"""Go pipeline graph builder.

Entry point: build_go(descriptor, inputs, factories) -> list[Node]

Graph shape (each node -> its inputs):

    toolchain   -> upstream inputs, golangci-lint, gofumpt
    lint        -> toolchain, golangci-lint, gofumpt
    unit-tests  -> toolchain
    coverage    -> unit-tests

    per command:
    <cmd>       -> toolchain
    image-<cmd> -> <cmd>, fhs, ca-certs, lint, unit-tests (drone only)

Every edge points at a node constructed earlier in the same call, so
the result is acyclic by construction.
"""

import logging
import posixpath
from typing import Callable, Optional, Sequence, TypeVar

from pipegen.core.config import get_settings
from pipegen.dag.errors import GraphConstructionError
from pipegen.dag.node import Node
from pipegen.detector.go.defaults import COMMANDS_DIR
from pipegen.detector.types import ProjectDescriptor
from pipegen.nodes.factories import DefaultNodeFactories, NodeFactories

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_go(
    descriptor: ProjectDescriptor,
    inputs: Sequence[Node] = (),
    factories: Optional[NodeFactories] = None,
) -> list[Node]:
    """Assemble the Go subgraph and return its output nodes.

    ``inputs`` become upstream dependencies of the toolchain node. The
    descriptor is only read. Outputs are the lint, unit-test and coverage
    nodes followed by one (build, image) pair per command, in command order.

    Raises:
        GraphConstructionError: A node factory failed; the step that was in
            progress is named and the original error is chained.
    """
    if factories is None:
        factories = DefaultNodeFactories(get_settings())

    # toolchain as the root of the subgraph
    toolchain = _construct("toolchain", factories.toolchain, descriptor)
    toolchain.add_input(*inputs)

    # analyzers inject into the toolchain build, so they are its inputs
    golangci_lint = _construct("golangci-lint", factories.golangci_lint, descriptor)
    gofumpt = _construct("gofumpt", factories.gofumpt, descriptor)
    toolchain.add_input(golangci_lint, gofumpt)

    lint = _construct("lint", factories.lint, descriptor)
    lint.add_input(toolchain, golangci_lint, gofumpt)

    unit_tests = _construct("unit-tests", factories.unit_tests, descriptor)
    unit_tests.add_input(toolchain)

    coverage = _construct(
        "coverage", factories.codecov, descriptor, factories.settings.coverage_path
    )
    coverage.add_input(unit_tests)

    outputs: list[Node] = [lint, unit_tests, coverage]

    for command in descriptor.commands:
        source_dir = posixpath.join(COMMANDS_DIR, command)

        build = _construct(f"build {command}", factories.build, descriptor, command, source_dir)
        build.add_input(toolchain)

        image = _construct(f"image {command}", factories.image, descriptor, command)
        image.add_input(
            build,
            _construct(f"fhs for {command}", factories.fhs, descriptor),
            _construct(f"ca-certs for {command}", factories.ca_certs, descriptor),
            lint,
            _construct(f"drone unit-tests for {command}", factories.drone, unit_tests),
        )

        outputs.extend([build, image])

    logger.info(
        "Built Go pipeline graph: %d outputs, %d commands",
        len(outputs),
        len(descriptor.commands),
    )
    return outputs


def _construct(step: str, factory: Callable[..., T], *args) -> T:
    try:
        return factory(*args)
    except Exception as exc:
        raise GraphConstructionError(step, exc) from exc
