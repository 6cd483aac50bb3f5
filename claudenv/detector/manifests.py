"""Manifest introspection for package.json and pyproject.toml.

Readers return the parsed document or None. None covers both "file is
not there" and "file could not be read or parsed", including documents
nested too deeply to decode. The detector treats the two the same way,
as "no extra evidence", so no caller ever has to catch anything.

Uses stdlib json and tomllib (Python 3.11+).
"""

import json
import logging
import tomllib
from dataclasses import replace
from pathlib import Path
from typing import Optional

from claudenv.detector.commands import package_manager_run_prefix
from claudenv.detector.signals import TEST_DEPENDENCY_SIGNALS
from claudenv.detector.types import FileSignals, StackDescription

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"
PYPROJECT_TOML = "pyproject.toml"

# package.json script name -> StackDescription field it overrides.
SCRIPT_OVERRIDES: tuple[tuple[str, str], ...] = (
    ("dev", "suggested_dev_cmd"),
    ("build", "suggested_build_cmd"),
    ("test", "suggested_test_cmd"),
    ("lint", "suggested_lint_cmd"),
)


def read_package_json(project_dir: Path) -> Optional[dict]:
    """Parse <project_dir>/package.json; None if absent, unreadable or not an object."""
    path = Path(project_dir) / PACKAGE_JSON
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except Exception as exc:
        logger.debug("No usable package.json at %s: %s", path, exc)
        return None
    return data if isinstance(data, dict) else None


def read_pyproject(project_dir: Path) -> Optional[dict]:
    """Parse <project_dir>/pyproject.toml; None if absent or unparsable."""
    path = Path(project_dir) / PYPROJECT_TOML
    try:
        with open(path, "rb") as fh:
            return tomllib.load(fh)
    except Exception as exc:
        logger.debug("No usable pyproject.toml at %s: %s", path, exc)
        return None


def detect_test_dependency(pkg: Optional[dict]) -> Optional[str]:
    """Match dependencies + devDependencies against TEST_DEPENDENCY_SIGNALS.

    A dependency only counts when its version spec is non-empty, so
    {"jest": ""} is ignored. devDependencies win on duplicate keys.
    """
    if pkg is None:
        return None
    all_deps: dict = {}
    all_deps.update(_as_dict(pkg.get("dependencies")))
    all_deps.update(_as_dict(pkg.get("devDependencies")))

    for dep_name, framework in TEST_DEPENDENCY_SIGNALS:
        if _is_set(all_deps.get(dep_name)):
            return framework
    return None


def apply_package_json(desc: StackDescription, pkg: Optional[dict]) -> StackDescription:
    """Refine desc from package.json scripts and workspaces.

    Declared scripts replace template-derived suggestions outright; the
    workspaces key only fills monorepo when nothing else claimed it.
    """
    if pkg is None:
        return desc

    scripts = _as_dict(pkg.get("scripts"))
    if scripts:
        pm_run = package_manager_run_prefix(desc.package_manager)
        overrides = {
            field_name: f"{pm_run} {script}"
            for script, field_name in SCRIPT_OVERRIDES
            if _is_set(scripts.get(script))
        }
        if overrides:
            desc = replace(desc, **overrides)

    if _is_set(pkg.get("workspaces")):
        desc = desc.promote(monorepo="npm-workspaces")
    return desc


def apply_pyproject(desc: StackDescription, data: Optional[dict]) -> StackDescription:
    """Fill test framework, linter and formatter from pyproject.toml, only where unset."""
    if data is None:
        return desc

    project = _as_dict(data.get("project"))
    tool = _as_dict(data.get("tool"))

    deps = project.get("dependencies")
    if isinstance(deps, list) and any(
        isinstance(dep, str) and dep.startswith("pytest") for dep in deps
    ):
        desc = desc.promote(test_framework="pytest")
    if _is_set(tool.get("pytest")):
        desc = desc.promote(test_framework="pytest")

    ruff = tool.get("ruff")
    if _is_set(ruff):
        desc = desc.promote(linter="ruff")
    if _is_set(tool.get("black")):
        desc = desc.promote(formatter="black")
    if isinstance(ruff, dict) and _is_set(ruff.get("format")):
        desc = desc.promote(formatter="ruff")
    return desc


def introspect_manifests(
    project_dir: Path,
    signals: FileSignals,
    desc: StackDescription,
) -> StackDescription:
    """Final refinement pass. package.json runs before pyproject.toml."""
    if PACKAGE_JSON in signals.path_set:
        desc = apply_package_json(desc, read_package_json(project_dir))
    if PYPROJECT_TOML in signals.path_set:
        desc = apply_pyproject(desc, read_pyproject(project_dir))
    return desc


def _as_dict(value) -> dict:
    return value if isinstance(value, dict) else {}


def _is_set(value) -> bool:
    """Presence test for manifest values: empty tables and lists still count.

    None, False, 0 and "" are absent.
    """
    if isinstance(value, (str, int, float)):
        return bool(value)
    return value is not None
