"""Ecosystem-neutral project layout detection.

A LayoutPolicy names the files and directories an ecosystem uses by
convention. detect_layout() turns a project root into descriptor fields
following one fixed order:

1. Parse the manifest (its absence means "not applicable").
2. Record every conventional source directory that exists.
3. Only if step 2 found nothing, record every top-level directory that
   directly holds a source file. Steps 2 and 3 never both contribute.
4. Record loose source files at the root (independent of steps 2-3).
5. Record the manifest and lock file as root files.
6. Resolve the version package: first existing candidate wins.
7. Record every sub-directory of the commands directory.

Directory listings are sorted by name, so results never depend on the
order the OS happens to return entries in.
"""

import logging
import posixpath
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from pipegen.detector.types import (
    DetectionIOError,
    ManifestParseError,
    ProjectDescriptor,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutPolicy:
    """Filesystem conventions of one ecosystem."""

    manifest: str
    lock_file: str
    source_suffix: str
    source_dirs: tuple[str, ...]
    version_package_candidates: tuple[str, ...] = ()
    commands_dir: Optional[str] = None


@dataclass
class ManifestInfo:
    """What a manifest parser extracts for the descriptor."""

    canonical_path: str
    language_version: str = ""
    requires: list[str] = field(default_factory=list)


ManifestParser = Callable[[str], ManifestInfo]


def detect_layout(
    root: Path,
    descriptor: ProjectDescriptor,
    policy: LayoutPolicy,
    parse_manifest: ManifestParser,
) -> bool:
    """Inspect ``root`` and fill ``descriptor`` according to ``policy``.

    Returns:
        False if the manifest is absent (descriptor untouched), True once
        detection has completed and the descriptor has been updated.

    Raises:
        DetectionIOError: A filesystem operation failed for a reason other
            than the path not existing.
        ManifestParseError: The manifest exists but is malformed.

    The descriptor is only updated when every step succeeds, so callers
    never observe a half-filled descriptor.
    """
    root = Path(root)
    text = _read_manifest(root, policy.manifest)
    if text is None:
        logger.debug("%s not found under %s, skipping", policy.manifest, root)
        return False

    working = descriptor.copy()

    # 1. Manifest
    info = parse_manifest(text)
    working.canonical_path = info.canonical_path
    working.language_version = info.language_version
    working.requires = []
    for module_path in info.requires:
        working.add_require(module_path)

    # 2. Conventional source directories
    conventional = [name for name in policy.source_dirs if _directory_exists(root, name)]
    for name in conventional:
        working.add_directory(name)

    # 3. Fallback: any top-level directory holding source files
    if not conventional:
        for path, is_dir in _list_dir(root):
            if is_dir and _has_source_files(path, policy.source_suffix):
                working.add_directory(path.name)

    # 4. Loose source files at the root
    for path, is_dir in _list_dir(root):
        if not is_dir and path.name.endswith(policy.source_suffix):
            working.add_source_file(path.name)

    # 5. Manifest and lock file are always part of the build context
    working.add_source_file(policy.manifest, ecosystem=False)
    working.add_source_file(policy.lock_file, ecosystem=False)

    # 6. Version package
    for candidate in policy.version_package_candidates:
        if _directory_exists(root, candidate):
            working.version_package = posixpath.join(working.canonical_path, candidate)
            break

    # 7. Commands
    if policy.commands_dir and _directory_exists(root, policy.commands_dir):
        for path, is_dir in _list_dir(root / policy.commands_dir):
            if is_dir:
                working.add_command(path.name)

    descriptor.update_from(working)

    logger.info(
        "Detected %s project: path=%s dirs=%s commands=%s",
        policy.manifest,
        descriptor.canonical_path,
        descriptor.ecosystem_directories,
        descriptor.commands,
    )
    return True


# ---------------------------------------------------------------------------
# Filesystem helpers
# ---------------------------------------------------------------------------

def _read_manifest(root: Path, name: str) -> Optional[str]:
    path = root / name
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise DetectionIOError(f"Failed to read {name}: {exc}") from exc

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ManifestParseError(f"{name} is not valid UTF-8: {exc}") from exc


def _directory_exists(root: Path, relative: str) -> bool:
    """Return True if ``root/relative`` is a directory.

    A missing path, or one that exists but is not a directory, is absent.
    """
    try:
        st = (root / relative).stat()
    except (FileNotFoundError, NotADirectoryError):
        return False
    except OSError as exc:
        raise DetectionIOError(f"Failed to stat {relative}: {exc}") from exc
    return stat.S_ISDIR(st.st_mode)


def _list_dir(path: Path) -> list[tuple[Path, bool]]:
    """Return ``(entry, is_dir)`` pairs for ``path``, sorted by name."""
    try:
        entries = [(entry, entry.is_dir()) for entry in path.iterdir()]
    except OSError as exc:
        raise DetectionIOError(f"Failed to list {path}: {exc}") from exc
    return sorted(entries, key=lambda item: item[0].name)


def _has_source_files(path: Path, suffix: str) -> bool:
    return any(
        not is_dir and entry.name.endswith(suffix)
        for entry, is_dir in _list_dir(path)
    )
