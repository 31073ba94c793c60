"""Node factories used by graph builders.

Builders never construct concrete nodes themselves; they call a
NodeFactories implementation. DefaultNodeFactories configures nodes from
Settings and the project descriptor. Tests and embedders may pass any
object with the same methods.
"""

import posixpath
from typing import Protocol

from pipegen.core.config import Settings
from pipegen.dag.node import Node, scoped_to_drone
from pipegen.detector.types import ProjectDescriptor
from pipegen.nodes.common import CACerts, FHS, Image, Lint
from pipegen.nodes.golang import Build, Gofumpt, GolangciLint, Toolchain, UnitTests
from pipegen.nodes.service import CodeCov


class NodeFactories(Protocol):
    """Constructors a graph builder needs; each returns a fresh Node."""

    settings: Settings

    def toolchain(self, meta: ProjectDescriptor) -> Node: ...

    def golangci_lint(self, meta: ProjectDescriptor) -> Node: ...

    def gofumpt(self, meta: ProjectDescriptor) -> Node: ...

    def lint(self, meta: ProjectDescriptor) -> Node: ...

    def unit_tests(self, meta: ProjectDescriptor) -> Node: ...

    def codecov(self, meta: ProjectDescriptor, input_path: str) -> Node: ...

    def build(self, meta: ProjectDescriptor, command: str, source_dir: str) -> Node: ...

    def image(self, meta: ProjectDescriptor, command: str) -> Node: ...

    def fhs(self, meta: ProjectDescriptor) -> Node: ...

    def ca_certs(self, meta: ProjectDescriptor) -> Node: ...

    def drone(self, node: Node) -> Node: ...


class DefaultNodeFactories:
    """NodeFactories backed by the concrete nodes in pipegen.nodes."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def toolchain(self, meta: ProjectDescriptor) -> Toolchain:
        return Toolchain(
            image=self.settings.toolchain_image,
            canonical_path=meta.canonical_path,
            go_version=meta.language_version,
            cgo_enabled=self.settings.cgo_enabled,
            source_dirs=list(meta.directories),
            source_files=list(meta.source_files),
        )

    def golangci_lint(self, meta: ProjectDescriptor) -> GolangciLint:
        return GolangciLint(version=self.settings.golangci_lint_version)

    def gofumpt(self, meta: ProjectDescriptor) -> Gofumpt:
        return Gofumpt(
            version=self.settings.gofumpt_version,
            local_prefix=meta.canonical_path,
        )

    def lint(self, meta: ProjectDescriptor) -> Lint:
        return Lint()

    def unit_tests(self, meta: ProjectDescriptor) -> UnitTests:
        return UnitTests(coverage_path=self.settings.coverage_path)

    def codecov(self, meta: ProjectDescriptor, input_path: str) -> CodeCov:
        return CodeCov(input_path=input_path, enabled=self.settings.codecov_enabled)

    def build(self, meta: ProjectDescriptor, command: str, source_dir: str) -> Build:
        return Build(
            name=command,
            command=command,
            source_dir=source_dir,
            output=f"/{command}",
            ldflags=_ldflags(self.settings.go_ldflags, meta.version_package, command),
            version_package=meta.version_package,
        )

    def image(self, meta: ProjectDescriptor, command: str) -> Image:
        return Image(
            name=f"image-{command}",
            command=command,
            base=self.settings.image_base,
            repository=_repository(self.settings.image_registry, meta.canonical_path, command),
            entrypoint=f"/{command}",
        )

    def fhs(self, meta: ProjectDescriptor) -> FHS:
        return FHS()

    def ca_certs(self, meta: ProjectDescriptor) -> CACerts:
        return CACerts()

    def drone(self, node: Node) -> Node:
        return scoped_to_drone(node)


def _ldflags(base: str, version_package: str | None, command: str) -> str:
    # Stamp the binary name into the version package when the project has one.
    if not version_package:
        return base
    return f"{base} -X {version_package}.Name={command}".strip()


def _repository(registry: str, canonical_path: str, command: str) -> str:
    """Derive the image repository, e.g. ghcr.io/org/command.

    The organisation is the second path element of the module path
    ("github.com/org/repo" -> "org"); module paths without one publish
    directly under the registry.
    """
    parts = canonical_path.split("/")
    org = parts[1] if len(parts) > 2 else ""
    return posixpath.join(registry, org, command) if org else posixpath.join(registry, command)
