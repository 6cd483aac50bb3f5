"""Tests for StackDescription and FileSignals helpers."""

import dataclasses

import pytest

from claudenv.detector.types import DetectedFiles, FileSignals, StackDescription


class TestStackDescription:
    def test_defaults(self):
        desc = StackDescription()
        assert desc.language is None
        assert desc.containerized is False
        assert desc.detected_files == DetectedFiles()

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            StackDescription().language = "go"

    def test_promote_only_fills_unset_fields(self):
        desc = StackDescription(linter="pylint").promote(linter="ruff", formatter="black")
        assert desc.linter == "pylint"
        assert desc.formatter == "black"

    def test_promote_ignores_none(self):
        desc = StackDescription()
        assert desc.promote(test_framework=None) is desc

    def test_with_provenance_appends(self):
        desc = StackDescription().with_provenance(infra=("docker",))
        desc = desc.with_provenance(infra=("terraform",), ci=(".travis.yml",))
        assert desc.detected_files.infra == ("docker", "terraform")
        assert desc.detected_files.ci == (".travis.yml",)

    def test_to_dict(self):
        data = StackDescription(language="go").with_provenance(manifests=("go.mod",)).to_dict()
        assert data["language"] == "go"
        assert data["containerized"] is False
        assert data["detected_files"] == {
            "manifests": ["go.mod"],
            "configs": [],
            "ci": [],
            "infra": [],
        }
        assert "suggested_lint_cmd" in data


class TestFileSignals:
    def test_has_matches_basename_or_path(self):
        signals = FileSignals.from_paths(["config/routes.rb"])
        assert signals.has("routes.rb")
        assert signals.has("config/routes.rb")
        assert not signals.has("routes")

    def test_first_named_prefers_walk_order(self):
        signals = FileSignals.from_paths(["package.json", "web/package.json"])
        assert signals.first_named("package.json") == "package.json"

    def test_first_with_suffix(self):
        signals = FileSignals.from_paths(["README.md", "App.sln", "src/App.csproj"])
        assert signals.first_with_suffix(".csproj") == "src/App.csproj"
        assert signals.first_with_suffix(".fsproj") is None
