"""Types for the documentation generator.

GeneratorConfig pairs a detected StackDescription with the fields only a
person (or CLI flags) can supply. GeneratedFile is one rendered output;
WriteResult reports what write_docs() did with a batch of them.
"""

from dataclasses import dataclass, field
from typing import Optional

from claudenv.detector.types import StackDescription


@dataclass
class GeneratorConfig:
    """Everything the templates need to render a project's docs."""

    stack: StackDescription = field(default_factory=StackDescription)
    project_description: Optional[str] = None
    project_type: Optional[str] = None  # "web-app" | "api" | "cli" | "library" | ...
    deployment: Optional[str] = None
    conventions: Optional[str] = None
    test_conventions: Optional[str] = None
    focus_areas: Optional[str] = None
    directories: list[str] = field(default_factory=list)
    additional_commands: list[str] = field(default_factory=list)
    rules: list[str] = field(default_factory=list)
    generate_rules: bool = True
    generate_hooks: bool = True
    enable_stop_hook: bool = True


@dataclass
class GeneratedFile:
    path: str  # relative to the project root, forward slashes
    content: str


@dataclass
class WriteResult:
    written: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {"written": list(self.written), "skipped": list(self.skipped)}


class TemplateRenderError(Exception):
    """Raised when a bundled template is missing or fails to render."""

    def __init__(self, template_name: str, message: str = ""):
        self.template_name = template_name
        super().__init__(message or f"Failed to render template '{template_name}'")
