"""Go ecosystem detector.

Entry point: detect_go(root, descriptor) -> bool
"""

from pathlib import Path

from pipegen.detector.go.defaults import GO_LAYOUT
from pipegen.detector.go.gomod import parse_gomod
from pipegen.detector.layout import detect_layout
from pipegen.detector.types import ProjectDescriptor


def detect_go(root: Path, descriptor: ProjectDescriptor) -> bool:
    """Return True and fill ``descriptor`` if ``root`` is a Go module."""
    return detect_layout(root, descriptor, GO_LAYOUT, parse_gomod)
