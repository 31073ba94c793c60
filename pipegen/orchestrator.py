"""Plugin orchestrator — runs every ecosystem plugin against a project root.

Generation flow:
1. Resolve settings (environment + the project's .pipegen.yaml).
2. For each registered plugin, in order, run its detector against a
   fresh descriptor. Plugins that do not apply are skipped.
3. Run the plugin's graph builder on the descriptor it detected.
4. Validate the combined outputs as one acyclic graph.

Each plugin gets its own descriptor; nothing is shared between plugin
runs except the upstream ``inputs`` handed to every builder.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Sequence

from pipegen.builder.go import build_go
from pipegen.core.config import Settings, load_settings
from pipegen.dag.node import Node
from pipegen.dag.walk import describe, validate
from pipegen.detector.go import detect_go
from pipegen.detector.types import ProjectDescriptor
from pipegen.nodes.factories import DefaultNodeFactories, NodeFactories

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Plugin:
    """A detector paired with the builder that consumes its descriptor."""

    name: str
    detect: Callable[[Path, ProjectDescriptor], bool]
    build: Callable[[ProjectDescriptor, Sequence[Node], NodeFactories], list[Node]]


PLUGINS: list[Plugin] = [
    Plugin(name="golang", detect=detect_go, build=build_go),
]


@dataclass
class GenerationResult:
    """Descriptors of every applicable plugin and the combined outputs."""

    descriptors: dict[str, ProjectDescriptor] = field(default_factory=dict)
    outputs: list[Node] = field(default_factory=list)

    @property
    def applicable(self) -> list[str]:
        return list(self.descriptors)

    def to_dict(self) -> dict:
        return {
            "plugins": {name: d.to_dict() for name, d in self.descriptors.items()},
            "outputs": [node.id for node in self.outputs],
            "nodes": describe(self.outputs),
        }


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def generate(
    root: Path,
    settings: Optional[Settings] = None,
    inputs: Sequence[Node] = (),
    factories: Optional[NodeFactories] = None,
    plugins: Optional[Sequence[Plugin]] = None,
) -> GenerationResult:
    """Detect applicable plugins under ``root`` and build their graphs.

    Raises:
        ConfigError: The project's .pipegen.yaml is invalid.
        DetectionError: A plugin applied but its detection failed.
        GraphError: A builder failed or the combined graph is invalid.

    Nothing is returned on failure; partial results are discarded.
    """
    root = Path(root)
    if settings is None:
        settings = load_settings(root)
    if factories is None:
        factories = DefaultNodeFactories(settings)

    result = GenerationResult()
    for plugin in PLUGINS if plugins is None else plugins:
        descriptor = ProjectDescriptor()
        if not plugin.detect(root, descriptor):
            logger.debug("Plugin %s does not apply to %s", plugin.name, root)
            continue

        result.descriptors[plugin.name] = descriptor
        result.outputs.extend(plugin.build(descriptor, inputs, factories))

    nodes = validate(result.outputs)
    logger.info(
        "Generation complete: plugins=%s outputs=%d nodes=%d",
        result.applicable,
        len(result.outputs),
        len(nodes),
    )
    return result
