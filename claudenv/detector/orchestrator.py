"""Detector orchestrator: scan, classify, suggest, refine.

Detection flow:
1. Scan the project tree into a FileSignals set (bounded depth).
2. Run the classifier phases (language through build tool).
3. Derive suggested commands from the stack.
4. Refine from package.json / pyproject.toml contents.

The result is a single immutable StackDescription. An empty project is
not an error: every optional field simply stays None.
"""

import logging
from pathlib import Path
from typing import Optional

from claudenv.core.config import Settings, get_settings
from claudenv.detector.classifier import classify
from claudenv.detector.commands import suggest_commands
from claudenv.detector.manifests import introspect_manifests
from claudenv.detector.scanner import scan_project
from claudenv.detector.types import FileSignals, StackDescription

logger = logging.getLogger(__name__)


def detect_tech_stack(
    project_dir: Path,
    settings: Optional[Settings] = None,
) -> StackDescription:
    """Scan project_dir and return its detected stack."""
    settings = settings or get_settings()
    project_dir = Path(project_dir)

    signals = scan_project(
        project_dir,
        max_depth=settings.scan_max_depth,
        ignore_dirs=settings.scan_ignore_dirs,
    )
    result = detect_from_signals(project_dir, signals)
    _log_result(project_dir, len(signals.paths), result)
    return result


def detect_from_signals(project_dir: Path, signals: FileSignals) -> StackDescription:
    """Run the pipeline on an already-collected signal set.

    project_dir is only used to read package.json and pyproject.toml.
    """
    desc = classify(project_dir, signals)
    desc = suggest_commands(desc)
    return introspect_manifests(project_dir, signals, desc)


def _log_result(project_dir: Path, file_count: int, result: StackDescription) -> None:
    logger.info(
        "Detection complete: dir=%s files=%d language=%s framework=%s pm=%s test=%s",
        project_dir,
        file_count,
        result.language,
        result.framework,
        result.package_manager,
        result.test_framework,
    )
