"""Suggested dev/build/test commands, derived from a finished stack.

Commands are never scanned for here. They come from SUGGESTED_COMMANDS,
keyed by framework first and runtime second, with "{pm}" replaced by the
package manager's run form. A lint command is only ever taken from a
declared package.json script (see manifests.py), which can also override
the others.
"""

from dataclasses import replace
from typing import Optional

from claudenv.detector.types import StackDescription

DEFAULT_PACKAGE_MANAGER = "npm"

# Framework or runtime -> command templates.
SUGGESTED_COMMANDS: dict[str, dict[str, str]] = {
    "next.js": {
        "dev": "{pm} next dev",
        "build": "{pm} next build",
        "test": "{pm} vitest run",
    },
    "vite": {
        "dev": "{pm} vite",
        "build": "{pm} vite build",
        "test": "{pm} vitest run",
    },
    "django": {
        "dev": "python manage.py runserver",
        "test": "python manage.py test",
        "migrate": "python manage.py migrate",
    },
    "rails": {
        "dev": "bin/rails server",
        "test": "bin/rails test",
        "migrate": "bin/rails db:migrate",
    },
    "spring-boot": {
        "dev": "./mvnw spring-boot:run",
        "build": "./mvnw package",
        "test": "./mvnw test",
    },
    "laravel": {
        "dev": "php artisan serve",
        "test": "php artisan test",
        "migrate": "php artisan migrate",
    },
    "go": {
        "build": "go build ./...",
        "test": "go test ./...",
    },
    "rust": {
        "build": "cargo build",
        "test": "cargo test",
    },
}

# Template key -> StackDescription field.
_COMMAND_FIELDS: tuple[tuple[str, str], ...] = (
    ("dev", "suggested_dev_cmd"),
    ("build", "suggested_build_cmd"),
    ("test", "suggested_test_cmd"),
)


def package_manager_run_prefix(package_manager: Optional[str]) -> str:
    """How scripts are invoked: "npm run" for npm, the bare manager otherwise."""
    pm = package_manager or DEFAULT_PACKAGE_MANAGER
    return "npm run" if pm == "npm" else pm


def suggest_commands(desc: StackDescription) -> StackDescription:
    pm_run = package_manager_run_prefix(desc.package_manager)

    key = desc.framework or desc.runtime
    templates = SUGGESTED_COMMANDS.get(key) if key else None
    if templates:
        return replace(
            desc,
            **{
                field_name: templates[name].replace("{pm}", pm_run) if name in templates else None
                for name, field_name in _COMMAND_FIELDS
            },
        )

    # Generic Node fallbacks
    if desc.runtime == "node":
        return replace(
            desc,
            suggested_dev_cmd=f"{pm_run} dev",
            suggested_build_cmd=f"{pm_run} build",
            suggested_test_cmd=f"{pm_run} test" if desc.test_framework else None,
        )
    return desc
