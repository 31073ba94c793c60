"""Go-specific pipeline nodes."""

from dataclasses import dataclass, field
from typing import Optional

from pipegen.dag.node import Node, NodeKind


@dataclass(eq=False)
class Toolchain(Node):
    """Prepared Go environment: image, module download, sources copied in."""

    name: str = "toolchain"
    kind: NodeKind = NodeKind.TOOLCHAIN
    image: str = ""
    canonical_path: str = ""
    go_version: str = ""
    cgo_enabled: bool = False
    source_dirs: list[str] = field(default_factory=list)
    source_files: list[str] = field(default_factory=list)


@dataclass(eq=False)
class GolangciLint(Node):
    name: str = "lint-golangci-lint"
    kind: NodeKind = NodeKind.ANALYZER
    version: str = ""


@dataclass(eq=False)
class Gofumpt(Node):
    name: str = "lint-gofumpt"
    kind: NodeKind = NodeKind.ANALYZER
    version: str = ""
    # gofumpt groups imports of the current module separately.
    local_prefix: str = ""


@dataclass(eq=False)
class UnitTests(Node):
    name: str = "unit-tests"
    kind: NodeKind = NodeKind.UNIT_TESTS
    packages: str = "./..."
    coverage_path: str = "coverage.txt"


@dataclass(eq=False)
class Build(Node):
    """Compiles one command from its directory into a static binary."""

    kind: NodeKind = NodeKind.BUILD
    command: str = ""
    source_dir: str = ""
    output: str = ""
    ldflags: str = ""
    version_package: Optional[str] = None
