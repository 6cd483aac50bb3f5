"""Detector module for inferring a project's technology stack.

Public API:
    detect_tech_stack(project_dir) -> StackDescription
"""

from claudenv.detector.orchestrator import detect_from_signals, detect_tech_stack
from claudenv.detector.types import DetectedFiles, FileSignals, StackDescription

__all__ = [
    "detect_tech_stack",
    "detect_from_signals",
    "DetectedFiles",
    "FileSignals",
    "StackDescription",
]
