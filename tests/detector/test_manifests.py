"""Unit tests for package.json / pyproject.toml introspection."""

import json
from pathlib import Path

from claudenv.detector.manifests import (
    apply_package_json,
    apply_pyproject,
    detect_test_dependency,
    introspect_manifests,
    read_package_json,
    read_pyproject,
)
from claudenv.detector.types import FileSignals, StackDescription


def _write_pkg(project_dir: Path, data) -> None:
    (project_dir / "package.json").write_text(json.dumps(data))


class TestReadPackageJson:
    def test_reads_object(self, tmp_path):
        _write_pkg(tmp_path, {"name": "app"})
        assert read_package_json(tmp_path) == {"name": "app"}

    def test_missing_file(self, tmp_path):
        assert read_package_json(tmp_path) is None

    def test_invalid_json(self, tmp_path):
        (tmp_path / "package.json").write_text("not json {{")
        assert read_package_json(tmp_path) is None

    def test_non_object_document(self, tmp_path):
        _write_pkg(tmp_path, ["not", "an", "object"])
        assert read_package_json(tmp_path) is None

    def test_directory_in_place_of_file(self, tmp_path):
        (tmp_path / "package.json").mkdir()
        assert read_package_json(tmp_path) is None

    def test_undecodable_bytes(self, tmp_path):
        (tmp_path / "package.json").write_bytes(b"\xff\xfe\x00garbage")
        assert read_package_json(tmp_path) is None

    def test_too_deeply_nested(self, tmp_path):
        (tmp_path / "package.json").write_text("[" * 100_000 + "]" * 100_000)
        assert read_package_json(tmp_path) is None


class TestReadPyproject:
    def test_reads_tables(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text('[project]\nname = "svc"\n')
        assert read_pyproject(tmp_path) == {"project": {"name": "svc"}}

    def test_missing_file(self, tmp_path):
        assert read_pyproject(tmp_path) is None

    def test_invalid_toml(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text("[project\nname = ")
        assert read_pyproject(tmp_path) is None

    def test_too_deeply_nested(self, tmp_path):
        (tmp_path / "pyproject.toml").write_text("a = " + "[" * 100_000 + "]" * 100_000 + "\n")
        assert read_pyproject(tmp_path) is None


class TestDetectTestDependency:
    def test_dev_dependency(self):
        assert detect_test_dependency({"devDependencies": {"mocha": "^10"}}) == "mocha"

    def test_scoped_package(self):
        assert detect_test_dependency({"devDependencies": {"@playwright/test": "^1.4"}}) == "playwright"

    def test_no_match(self):
        assert detect_test_dependency({"dependencies": {"react": "^18"}}) is None

    def test_zero_version_is_ignored(self):
        assert detect_test_dependency({"devDependencies": {"jest": 0, "mocha": "^10"}}) == "mocha"

    def test_none(self):
        assert detect_test_dependency(None) is None


class TestApplyPackageJson:
    def test_scripts_use_package_manager_run_form(self):
        desc = StackDescription(package_manager="pnpm", suggested_dev_cmd="pnpm vite")
        refined = apply_package_json(desc, {"scripts": {"dev": "vite", "lint": "eslint ."}})

        assert refined.suggested_dev_cmd == "pnpm dev"
        assert refined.suggested_lint_cmd == "pnpm lint"

    def test_npm_run_form(self):
        refined = apply_package_json(StackDescription(package_manager="npm"), {"scripts": {"test": "jest"}})
        assert refined.suggested_test_cmd == "npm run test"

    def test_undeclared_scripts_left_alone(self):
        desc = StackDescription(package_manager="npm", suggested_build_cmd="npm run next build")
        refined = apply_package_json(desc, {"scripts": {"dev": "next dev"}})
        assert refined.suggested_build_cmd == "npm run next build"

    def test_empty_script_ignored(self):
        desc = StackDescription(package_manager="npm", suggested_dev_cmd="npm run vite")
        assert apply_package_json(desc, {"scripts": {"dev": ""}}) == desc

    def test_workspaces_set_monorepo(self):
        refined = apply_package_json(StackDescription(), {"workspaces": []})
        assert refined.monorepo == "npm-workspaces"

    def test_zero_or_false_workspaces_ignored(self):
        assert apply_package_json(StackDescription(), {"workspaces": 0}).monorepo is None
        assert apply_package_json(StackDescription(), {"workspaces": False}).monorepo is None

    def test_workspaces_do_not_replace_monorepo(self):
        refined = apply_package_json(StackDescription(monorepo="nx"), {"workspaces": ["a"]})
        assert refined.monorepo == "nx"

    def test_none_is_a_no_op(self):
        desc = StackDescription(language="javascript")
        assert apply_package_json(desc, None) is desc


class TestApplyPyproject:
    def test_pytest_dependency(self):
        refined = apply_pyproject(StackDescription(), {"project": {"dependencies": ["pytest-cov>=4"]}})
        assert refined.test_framework == "pytest"

    def test_pytest_table(self):
        refined = apply_pyproject(StackDescription(), {"tool": {"pytest": {"ini_options": {}}}})
        assert refined.test_framework == "pytest"

    def test_existing_test_framework_kept(self):
        refined = apply_pyproject(StackDescription(test_framework="unittest"), {"tool": {"pytest": {}}})
        assert refined.test_framework == "unittest"

    def test_ruff_linter_and_formatter(self):
        refined = apply_pyproject(StackDescription(), {"tool": {"ruff": {"format": {}}}})
        assert refined.linter == "ruff"
        assert refined.formatter == "ruff"

    def test_black_checked_before_ruff_format(self):
        refined = apply_pyproject(StackDescription(), {"tool": {"black": {}, "ruff": {"format": {}}}})
        assert refined.formatter == "black"

    def test_existing_formatter_kept(self):
        refined = apply_pyproject(StackDescription(formatter="yapf"), {"tool": {"black": {}}})
        assert refined.formatter == "yapf"

    def test_non_list_dependencies(self):
        refined = apply_pyproject(StackDescription(), {"project": {"dependencies": "pytest"}})
        assert refined.test_framework is None

    def test_unexpected_shapes(self):
        assert apply_pyproject(StackDescription(), {"tool": "ruff", "project": []}) == StackDescription()


class TestIntrospectManifests:
    def test_only_root_manifests_listed_in_signals_are_read(self, tmp_path):
        _write_pkg(tmp_path, {"scripts": {"dev": "vite"}})
        desc = introspect_manifests(tmp_path, FileSignals(), StackDescription())
        assert desc.suggested_dev_cmd is None

    def test_reads_both_manifests(self, tmp_path):
        _write_pkg(tmp_path, {"scripts": {"test": "pytest"}})
        (tmp_path / "pyproject.toml").write_text("[tool.ruff]\n")
        signals = FileSignals.from_paths(["package.json", "pyproject.toml"])

        desc = introspect_manifests(tmp_path, signals, StackDescription(package_manager="npm"))

        assert desc.suggested_test_cmd == "npm run test"
        assert desc.linter == "ruff"
