"""Template context builder.

Turns a GeneratorConfig into the flat dict the Jinja2 templates render
from. Every variable a template touches gets a default here, so templates
never need `is defined` guards.
"""

from typing import Optional

from claudenv.detector.commands import package_manager_run_prefix
from claudenv.generator.types import GeneratorConfig

MIGRATE_COMMANDS: dict[str, str] = {
    "django": "python manage.py migrate",
    "rails": "bin/rails db:migrate",
    "laravel": "php artisan migrate",
}

FORMAT_COMMANDS: dict[str, str] = {
    "prettier": "npx prettier --write .",
    "black": "black .",
    "ruff": "ruff format .",
    "rustfmt": "cargo fmt",
}

# Language -> (source globs, test globs) for path-scoped rules.
PATH_GLOBS: dict[str, tuple[list[str], list[str]]] = {
    "typescript": (
        ["src/**/*.ts", "src/**/*.tsx", "src/**/*.js", "src/**/*.jsx"],
        ["**/*.test.ts", "**/*.test.tsx", "**/*.spec.ts", "**/__tests__/**"],
    ),
    "python": (["**/*.py"], ["tests/**/*.py", "**/test_*.py"]),
    "go": (["**/*.go"], ["**/*_test.go"]),
    "rust": (["src/**/*.rs"], ["tests/**/*.rs"]),
}
PATH_GLOBS["javascript"] = PATH_GLOBS["typescript"]

LANGUAGE_NAMES: dict[str, str] = {
    "typescript": "TypeScript",
    "javascript": "JavaScript",
    "python": "Python",
    "go": "Go",
    "rust": "Rust",
    "ruby": "Ruby",
    "php": "PHP",
    "java": "Java",
    "kotlin": "Kotlin",
    "csharp": "C#",
}


def build_template_data(config: GeneratorConfig) -> dict:
    """Build the render context for every template."""
    stack = config.stack
    source_globs, test_globs = PATH_GLOBS.get(stack.language or "", ([], []))

    data = stack.to_dict()
    data.update(
        language_name=LANGUAGE_NAMES.get(stack.language or "", stack.language),
        commands=build_commands(config),
        path_globs=list(source_globs),
        test_path_globs=list(test_globs),
        project_description=config.project_description,
        project_type=config.project_type,
        deployment=config.deployment,
        conventions=config.conventions or "",
        test_conventions=config.test_conventions or "",
        focus_areas=config.focus_areas,
        directories=list(config.directories),
        additional_commands=list(config.additional_commands),
        rules=list(config.rules),
        generate_rules=config.generate_rules,
    )
    return data


def build_commands(config: GeneratorConfig) -> dict[str, Optional[str]]:
    stack = config.stack
    pm_run = package_manager_run_prefix(stack.package_manager)

    commands: dict[str, Optional[str]] = {
        "dev": stack.suggested_dev_cmd,
        "build": stack.suggested_build_cmd,
        "test": stack.suggested_test_cmd,
        "lint": stack.suggested_lint_cmd,
        "migrate": MIGRATE_COMMANDS.get(stack.framework or ""),
        "format": FORMAT_COMMANDS.get(stack.formatter or ""),
        "test_single": None,
        "test_watch": None,
        "test_coverage": None,
    }

    if stack.test_framework == "vitest":
        commands["test_single"] = f"{pm_run} vitest run path/to/file"
        commands["test_watch"] = f"{pm_run} vitest"
        commands["test_coverage"] = f"{pm_run} vitest run --coverage"
    elif stack.test_framework == "jest":
        commands["test_single"] = f"{pm_run} jest -- path/to/file"
        commands["test_watch"] = f"{pm_run} jest --watch"
        commands["test_coverage"] = f"{pm_run} jest --coverage"
    elif stack.test_framework == "pytest":
        commands["test_single"] = "pytest path/to/test_file.py"
        commands["test_watch"] = "ptw"
        commands["test_coverage"] = "pytest --cov"

    return commands
