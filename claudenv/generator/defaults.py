"""Non-interactive generator config built from detection output.

build_default_config() is what `claudenv generate` uses: detected stack
plus sensible defaults, with optional overrides for the fields detection
cannot know (description, deployment, conventions, ...).
"""

from dataclasses import fields
from pathlib import Path
from typing import Optional

from claudenv.detector.manifests import read_package_json
from claudenv.detector.types import StackDescription
from claudenv.generator.types import GeneratorConfig

# Framework -> rules always worth stating for it.
FRAMEWORK_RULES: dict[str, list[str]] = {
    "next.js": [
        "Use server components by default; add 'use client' only when needed",
        "Prefer server actions for mutations over API routes",
    ],
    "django": [
        "NEVER modify migration files after they have been committed",
    ],
}

_OVERRIDABLE = {f.name for f in fields(GeneratorConfig)} - {"stack", "rules"}


def build_default_config(
    detected: StackDescription,
    project_dir: Path,
    overrides: Optional[dict] = None,
) -> GeneratorConfig:
    """Build a GeneratorConfig without asking anything.

    Unknown override keys raise TypeError so typos in callers surface.
    """
    overrides = dict(overrides or {})
    unknown = set(overrides) - _OVERRIDABLE
    if unknown:
        raise TypeError(f"Unknown config overrides: {', '.join(sorted(unknown))}")

    config = GeneratorConfig(
        stack=detected,
        project_description=_default_description(detected, project_dir),
    )
    for name, value in overrides.items():
        setattr(config, name, value)

    config.rules = build_rules(detected, config.focus_areas)
    return config


def build_rules(detected: StackDescription, focus_areas: Optional[str] = None) -> list[str]:
    rules = list(FRAMEWORK_RULES.get(detected.framework or "", []))

    if detected.linter:
        rules.append(
            f"Run `{detected.suggested_lint_cmd or detected.linter}` before committing"
        )
    if focus_areas:
        rules.append(f"Pay special attention to: {focus_areas}")
    return rules


def _default_description(detected: StackDescription, project_dir: Path) -> str:
    kind = detected.framework or detected.language
    description = f"{kind or 'Unknown'} project"

    pkg = read_package_json(project_dir)
    if pkg is None:
        return description
    if isinstance(pkg.get("description"), str) and pkg["description"]:
        return pkg["description"]
    if isinstance(pkg.get("name"), str) and pkg["name"]:
        return f"{pkg['name']} - {kind} project"
    return description
