"""File scanner: turns a project directory into a FileSignals set.

Walks breadth-first so root-level files come before nested ones, with
entries sorted by name inside each directory. Hidden entries are
included (CI and lint configs live in dotfiles); dependency, VCS and
build-output directories are skipped by name.

Depth counts path segments: with max_depth=3, ".github/workflows/ci.yml"
is kept and "a/b/c/d.txt" is not.
"""

import logging
from collections import deque
from pathlib import Path

from claudenv.detector.types import FileSignals

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 3

DEFAULT_IGNORE_DIRS: tuple[str, ...] = (
    "node_modules",
    ".git",
    "vendor",
    "__pycache__",
    "target",
)


def scan_project(
    project_dir: Path,
    max_depth: int = DEFAULT_MAX_DEPTH,
    ignore_dirs=DEFAULT_IGNORE_DIRS,
) -> FileSignals:
    """Return the relative file paths under project_dir as a FileSignals.

    Unreadable directories contribute nothing. A missing project_dir
    yields an empty signal set.
    """
    root = Path(project_dir)
    skip = set(ignore_dirs)
    paths: list[str] = []

    queue: deque[tuple[Path, str, int]] = deque([(root, "", 0)])
    while queue:
        directory, prefix, depth = queue.popleft()
        try:
            entries = sorted(directory.iterdir(), key=lambda e: e.name)
        except OSError as exc:
            logger.debug("Skipping unreadable directory %s: %s", directory, exc)
            continue

        for entry in entries:
            rel = f"{prefix}{entry.name}"
            try:
                is_dir = entry.is_dir() and not entry.is_symlink()
                is_file = entry.is_file()
            except OSError:
                continue

            if is_dir:
                if entry.name in skip or depth + 1 >= max_depth:
                    continue
                queue.append((entry, f"{rel}/", depth + 1))
            elif is_file and depth + 1 <= max_depth:
                paths.append(rel)

    return FileSignals.from_paths(paths)
