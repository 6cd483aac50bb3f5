"""Validation of generated documentation against the project tree."""

from claudenv.validator.checks import (
    cross_reference_check,
    validate_manifest_doc,
    validate_structure,
)
from claudenv.validator.types import ValidationResult

__all__ = [
    "cross_reference_check",
    "validate_manifest_doc",
    "validate_structure",
    "ValidationResult",
]
