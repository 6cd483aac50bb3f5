"""Shared types for the detector module.

All detector output conforms to StackDescription: a frozen value produced
by a single detect_tech_stack() call. Phases never mutate it; each one
returns a new value via dataclasses.replace().
"""

from dataclasses import dataclass, field, fields, replace
from typing import Optional


@dataclass(frozen=True)
class FileSignals:
    """The raw signal set a scan operates on.

    paths keeps walk order (used for "first matching path" provenance);
    path_set and names give O(1) membership checks on relative paths and
    basenames respectively.
    """

    paths: tuple[str, ...] = ()
    path_set: frozenset[str] = frozenset()
    names: frozenset[str] = frozenset()

    @classmethod
    def from_paths(cls, paths) -> "FileSignals":
        ordered = tuple(paths)
        return cls(
            paths=ordered,
            path_set=frozenset(ordered),
            names=frozenset(p.rsplit("/", 1)[-1] for p in ordered),
        )

    def has(self, name: str) -> bool:
        """True if name matches a basename or a full relative path."""
        return name in self.names or name in self.path_set

    def first_named(self, name: str) -> Optional[str]:
        for path in self.paths:
            if path == name or path.rsplit("/", 1)[-1] == name:
                return path
        return None

    def first_with_suffix(self, suffix: str) -> Optional[str]:
        for path in self.paths:
            if path.endswith(suffix):
                return path
        return None


@dataclass(frozen=True)
class DetectedFiles:
    """Provenance: the paths (or, for infra, tool labels) behind each field."""

    manifests: tuple[str, ...] = ()
    configs: tuple[str, ...] = ()
    ci: tuple[str, ...] = ()
    infra: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "manifests": list(self.manifests),
            "configs": list(self.configs),
            "ci": list(self.ci),
            "infra": list(self.infra),
        }


@dataclass(frozen=True)
class StackDescription:
    """Complete detection output for a project directory.

    Every attribute except containerized and detected_files is None until
    a phase finds evidence for it. A description with language None means
    no known manifest was found; what to do about that is up to the caller.
    """

    language: Optional[str] = None
    runtime: Optional[str] = None
    framework: Optional[str] = None
    package_manager: Optional[str] = None
    build_tool: Optional[str] = None
    test_framework: Optional[str] = None
    linter: Optional[str] = None
    formatter: Optional[str] = None
    ci: Optional[str] = None
    containerized: bool = False
    monorepo: Optional[str] = None
    suggested_dev_cmd: Optional[str] = None
    suggested_build_cmd: Optional[str] = None
    suggested_test_cmd: Optional[str] = None
    suggested_lint_cmd: Optional[str] = None
    detected_files: DetectedFiles = field(default_factory=DetectedFiles)

    def promote(self, **values: Optional[str]) -> "StackDescription":
        """Return a copy with each given field set only where it is still None.

        None values are ignored, so callers can pass optional evidence
        straight through.
        """
        updates = {
            name: value
            for name, value in values.items()
            if value is not None and getattr(self, name) is None
        }
        return replace(self, **updates) if updates else self

    def with_provenance(self, **paths: tuple[str, ...]) -> "StackDescription":
        """Return a copy with paths appended to the given provenance lists."""
        current = self.detected_files
        updated = replace(
            current,
            **{kind: getattr(current, kind) + tuple(extra) for kind, extra in paths.items()},
        )
        return replace(self, detected_files=updated)

    def to_dict(self) -> dict:
        data = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "detected_files"
        }
        data["detected_files"] = self.detected_files.to_dict()
        return data
