"""Filesystem conventions for Go projects."""

from pipegen.detector.layout import LayoutPolicy

GO_MOD = "go.mod"
GO_SUM = "go.sum"

# Checked in this order; the order is kept in the descriptor.
SOURCE_DIRS: tuple[str, ...] = ("src", "internal", "pkg", "cmd")

VERSION_PACKAGE_CANDIDATES: tuple[str, ...] = ("pkg/version", "internal/version")

COMMANDS_DIR = "cmd"

GO_LAYOUT = LayoutPolicy(
    manifest=GO_MOD,
    lock_file=GO_SUM,
    source_suffix=".go",
    source_dirs=SOURCE_DIRS,
    version_package_candidates=VERSION_PACKAGE_CANDIDATES,
    commands_dir=COMMANDS_DIR,
)
