"""Errors raised while building or validating a pipeline graph."""

from pipegen.core.errors import PipegenError


class GraphError(PipegenError):
    """Raised when a graph is structurally invalid."""


class CycleError(GraphError):
    """Raised when following ``inputs`` edges leads back to a node on the path."""

    def __init__(self, path: list[str]):
        self.path = path
        super().__init__(f"Cycle in pipeline graph: {' -> '.join(path)}")


class GraphConstructionError(GraphError):
    """Raised when a node factory fails during graph assembly.

    ``step`` names the construction step in progress; the factory's own
    exception is chained as ``__cause__``.
    """

    def __init__(self, step: str, cause: Exception):
        self.step = step
        super().__init__(f"Failed to construct {step}: {cause}")
