"""Result type shared by every documentation check."""

from dataclasses import dataclass, field


@dataclass
class ValidationResult:
    """Outcome of one check. valid is False iff there is at least one error."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }
