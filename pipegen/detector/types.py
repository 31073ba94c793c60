"""Shared types for the detector module.

Every ecosystem detector fills a ProjectDescriptor. A descriptor is a
snapshot of the project layout taken at detection time; nothing after
detection re-validates it against the filesystem.
"""

from dataclasses import dataclass, field, fields
from typing import Optional

from pipegen.core.errors import PipegenError


class DetectionError(PipegenError):
    """Raised when detection fails after the manifest was found.

    The plugin applies to the project but its descriptor cannot be
    trusted, so the caller must abort this plugin's run.
    """


class DetectionIOError(DetectionError):
    """Raised on a filesystem error other than "path does not exist"."""


class ManifestParseError(DetectionError):
    """Raised when the manifest exists but cannot be parsed."""


@dataclass
class ProjectDescriptor:
    """Everything discovered about a project's layout.

    ``directories`` and ``source_files`` accumulate across every plugin
    run against the same project; the ``ecosystem_*`` fields hold the
    subset attributed to the plugin that filled them. All lists are
    insertion-ordered and duplicate-free.
    """

    canonical_path: str = ""
    directories: list[str] = field(default_factory=list)
    ecosystem_directories: list[str] = field(default_factory=list)
    source_files: list[str] = field(default_factory=list)
    ecosystem_source_files: list[str] = field(default_factory=list)
    version_package: Optional[str] = None
    commands: list[str] = field(default_factory=list)
    language_version: str = ""
    requires: list[str] = field(default_factory=list)

    def add_directory(self, name: str) -> None:
        _append_unique(self.directories, name)
        _append_unique(self.ecosystem_directories, name)

    def add_source_file(self, name: str, ecosystem: bool = True) -> None:
        _append_unique(self.source_files, name)
        if ecosystem:
            _append_unique(self.ecosystem_source_files, name)

    def add_command(self, name: str) -> None:
        _append_unique(self.commands, name)

    def add_require(self, module_path: str) -> None:
        _append_unique(self.requires, module_path)

    def copy(self) -> "ProjectDescriptor":
        return ProjectDescriptor(
            canonical_path=self.canonical_path,
            directories=list(self.directories),
            ecosystem_directories=list(self.ecosystem_directories),
            source_files=list(self.source_files),
            ecosystem_source_files=list(self.ecosystem_source_files),
            version_package=self.version_package,
            commands=list(self.commands),
            language_version=self.language_version,
            requires=list(self.requires),
        )

    def update_from(self, other: "ProjectDescriptor") -> None:
        """Overwrite every field with the values held by ``other``."""
        for f in fields(self):
            value = getattr(other, f.name)
            setattr(self, f.name, list(value) if isinstance(value, list) else value)

    def to_dict(self) -> dict:
        return {
            "canonical_path": self.canonical_path,
            "directories": list(self.directories),
            "ecosystem_directories": list(self.ecosystem_directories),
            "source_files": list(self.source_files),
            "ecosystem_source_files": list(self.ecosystem_source_files),
            "version_package": self.version_package,
            "commands": list(self.commands),
            "language_version": self.language_version,
            "requires": list(self.requires),
        }


def _append_unique(items: list[str], value: str) -> None:
    if value not in items:
        items.append(value)
