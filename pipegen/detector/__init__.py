"""Detector module: decides which ecosystem plugins apply to a project.

Public API:
    detect_go(root, descriptor) -> bool
    detect_layout(root, descriptor, policy, parse_manifest) -> bool
"""

from pipegen.detector.go import detect_go
from pipegen.detector.layout import LayoutPolicy, ManifestInfo, detect_layout
from pipegen.detector.types import (
    DetectionError,
    DetectionIOError,
    ManifestParseError,
    ProjectDescriptor,
)

__all__ = [
    "detect_go",
    "detect_layout",
    "DetectionError",
    "DetectionIOError",
    "LayoutPolicy",
    "ManifestInfo",
    "ManifestParseError",
    "ProjectDescriptor",
]
