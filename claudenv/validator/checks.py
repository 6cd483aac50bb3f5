"""Structural checks for the generated documentation.

validate_manifest_doc  - CLAUDE.md has the required sections and its
                         @path imports resolve
validate_structure     - the .claude/ layout is present and settings.json parses
cross_reference_check  - directories and scripts the doc mentions exist

Checks report problems through ValidationResult; they never raise for a
missing or malformed document.
"""

import json
import logging
import re
from pathlib import Path
from typing import Optional

from claudenv.detector.manifests import read_package_json
from claudenv.validator.types import ValidationResult

logger = logging.getLogger(__name__)

MANIFEST_DOC = "CLAUDE.md"
SETTINGS_PATH = ".claude/settings.json"

REQUIRED_SECTIONS: tuple[str, ...] = ("## Commands", "## Architecture")

OPTIONAL_PATHS: tuple[tuple[str, str], ...] = (
    (".claude/commands", "commands directory"),
    (".claude/rules", "rules directory"),
    (SETTINGS_PATH, "settings.json"),
)

_TITLE_RE = re.compile(r"^#\s+\S", re.MULTILINE)
_IMPORT_RE = re.compile(r"^@([^\s@]+)$")
_DIR_REF_RE = re.compile(r"`([^`]+/)`")
_SCRIPT_REF_RE = re.compile(r"(?:npm run|pnpm|yarn|bun(?:x| run)?)\s+([a-z][\w:-]*)")


def validate_manifest_doc(path: Path) -> ValidationResult:
    """Check CLAUDE.md for required structure and resolvable imports."""
    path = Path(path)
    result = ValidationResult()

    content = _read_text(path)
    if content is None:
        result.errors.append(f"File not found: {path}")
        return result
    if not content.strip():
        result.errors.append(f"{path.name} is empty")
        return result

    for section in REQUIRED_SECTIONS:
        if section not in content:
            result.errors.append(f"Missing required section: {section}")

    if not _TITLE_RE.search(content):
        result.warnings.append("No top-level heading (# Title) found")

    commands = extract_section(content, "Commands")
    if commands is not None and "`" not in commands.strip():
        result.warnings.append(
            "## Commands section has no inline code (expected command examples)"
        )

    result.errors.extend(_unresolved_imports(content, path.parent))
    return result


def validate_structure(project_dir: Path) -> ValidationResult:
    """Check for CLAUDE.md and the optional .claude/ layout."""
    project_dir = Path(project_dir)
    result = ValidationResult()

    if not (project_dir / MANIFEST_DOC).exists():
        result.errors.append(f"{MANIFEST_DOC} not found in project root")

    for rel_path, label in OPTIONAL_PATHS:
        if not (project_dir / rel_path).exists():
            result.warnings.append(f"Optional {label} not found at {rel_path}")

    settings_path = project_dir / SETTINGS_PATH
    if settings_path.is_file():
        try:
            json.loads(settings_path.read_text(encoding="utf-8"))
        except Exception as exc:
            result.errors.append(f"{SETTINGS_PATH} is not valid JSON: {exc}")

    return result


def cross_reference_check(project_dir: Path) -> ValidationResult:
    """Compare what CLAUDE.md claims against the real project tree."""
    project_dir = Path(project_dir)
    result = ValidationResult()

    content = _read_text(project_dir / MANIFEST_DOC)
    if content is None:
        result.errors.append(f"{MANIFEST_DOC} not found; cannot cross-reference")
        return result

    architecture = extract_section(content, "Architecture")
    if architecture:
        for dir_ref in _DIR_REF_RE.findall(architecture):
            if not (project_dir / dir_ref).exists():
                result.warnings.append(
                    f'Architecture references directory "{dir_ref}" which does not exist'
                )

    pkg = read_package_json(project_dir)
    commands = extract_section(content, "Commands")
    if pkg is not None and commands:
        scripts = pkg.get("scripts")
        scripts = scripts if isinstance(scripts, dict) else {}
        for script in _SCRIPT_REF_RE.findall(commands):
            if not scripts.get(script):
                result.warnings.append(
                    f'Commands section references script "{script}" not found in package.json'
                )

    return result


def extract_section(content: str, heading: str) -> Optional[str]:
    """Body of a "## heading" section, up to the next heading; None if absent.

    The heading must start its line, so "### Commands" is not a match for
    "Commands".
    """
    match = re.search(
        rf"^## {re.escape(heading)}\n(.*?)(?=\n## |\n# |\Z)",
        content,
        re.MULTILINE | re.DOTALL,
    )
    return match.group(1) if match else None


def _unresolved_imports(content: str, base_dir: Path) -> list[str]:
    """Bare "@path" lines outside fenced code blocks that point nowhere."""
    errors: list[str] = []
    in_code_block = False

    for line in content.splitlines():
        if line.lstrip().startswith("```"):
            in_code_block = not in_code_block
            continue
        if in_code_block:
            continue

        match = _IMPORT_RE.match(line)
        if not match:
            continue
        import_path = match.group(1)
        if import_path.startswith("~/"):
            resolved = Path.home() / import_path[2:]
        else:
            resolved = base_dir / import_path
        if not resolved.exists():
            errors.append(f'@import reference "{import_path}" does not resolve to a file')

    return errors


def _read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Cannot read %s: %s", path, exc)
        return None
