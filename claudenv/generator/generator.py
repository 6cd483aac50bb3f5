"""Documentation generator.

Renders CLAUDE.md, the .claude/rules/ documents, _state.md and
.claude/settings.json from bundled Jinja2 templates, then writes them into
a project without clobbering files that already exist.
"""

import json
import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from claudenv.generator.context import build_template_data
from claudenv.generator.types import (
    GeneratedFile,
    GeneratorConfig,
    TemplateRenderError,
    WriteResult,
)

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"

# (template, output path) for the rules documents.
RULE_TEMPLATES: tuple[tuple[str, str], ...] = (
    ("rules-code-style.md.j2", ".claude/rules/code-style.md"),
    ("rules-testing.md.j2", ".claude/rules/testing.md"),
    ("rules-workflow.md.j2", ".claude/rules/workflow.md"),
)

VALIDATION_SCRIPT_PATH = ".claude/skills/doc-generator/scripts/validate.sh"

_env: Environment | None = None


def get_environment() -> Environment:
    """Return the shared Jinja2 environment, creating it on first use."""
    global _env
    if _env is None:
        _env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            undefined=StrictUndefined,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
    return _env


def generate_docs(config: GeneratorConfig) -> list[GeneratedFile]:
    """Render every document the config asks for. Nothing touches disk."""
    data = build_template_data(config)
    files = [GeneratedFile(path="CLAUDE.md", content=render_template("claude-md.md.j2", data))]

    if config.generate_rules:
        for template_name, path in RULE_TEMPLATES:
            files.append(GeneratedFile(path=path, content=render_template(template_name, data)))

    files.append(GeneratedFile(path="_state.md", content=render_template("state-md.md.j2", data)))

    if config.generate_hooks:
        files.append(GeneratedFile(
            path=".claude/settings.json",
            content=build_settings_json(config.enable_stop_hook),
        ))

    return files


def render_template(template_name: str, data: dict) -> str:
    try:
        return get_environment().get_template(template_name).render(**data)
    except TemplateError as exc:
        raise TemplateRenderError(template_name, f"{template_name}: {exc}") from exc


def build_settings_json(enable_stop_hook: bool = True) -> str:
    """Settings with a Stop hook that runs the doc validation script."""
    settings: dict = {"hooks": {}}
    if enable_stop_hook:
        settings["hooks"]["Stop"] = [
            {
                "hooks": [
                    {
                        "type": "command",
                        "command": f"bash {VALIDATION_SCRIPT_PATH}",
                    }
                ]
            }
        ]
    return json.dumps(settings, indent=2) + "\n"


def write_docs(
    project_dir: Path,
    files: list[GeneratedFile],
    overwrite: bool = False,
    dry_run: bool = False,
) -> WriteResult:
    """Write files under project_dir.

    Existing files are skipped unless overwrite is set. With dry_run the
    result lists what would be written, and the disk is left alone.
    """
    project_dir = Path(project_dir)
    result = WriteResult()

    for file in files:
        full_path = project_dir / file.path

        if not overwrite and full_path.exists():
            logger.debug("Skipping existing file %s", file.path)
            result.skipped.append(file.path)
            continue

        if not dry_run:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            full_path.write_text(file.content, encoding="utf-8")
            logger.debug("Wrote %s (%d bytes)", file.path, len(file.content))
        result.written.append(file.path)

    return result
