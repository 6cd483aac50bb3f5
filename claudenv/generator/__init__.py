"""Documentation generator: config, rendering and writing.

Public API:
    build_default_config(detected, project_dir) -> GeneratorConfig
    generate_docs(config) -> list[GeneratedFile]
    write_docs(project_dir, files) -> WriteResult
"""

from claudenv.generator.defaults import build_default_config
from claudenv.generator.generator import generate_docs, write_docs
from claudenv.generator.types import (
    GeneratedFile,
    GeneratorConfig,
    TemplateRenderError,
    WriteResult,
)

__all__ = [
    "build_default_config",
    "generate_docs",
    "write_docs",
    "GeneratedFile",
    "GeneratorConfig",
    "TemplateRenderError",
    "WriteResult",
]
