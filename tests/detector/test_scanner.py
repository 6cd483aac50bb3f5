"""Tests for the project file scanner."""

from pathlib import Path

from claudenv.detector.scanner import scan_project


def _touch(root: Path, *rel_paths: str) -> None:
    for rel_path in rel_paths:
        path = root / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("")


class TestScanProject:
    def test_relative_paths_and_basenames(self, tmp_path):
        _touch(tmp_path, "package.json", "src/index.ts")
        signals = scan_project(tmp_path)

        assert signals.path_set == {"package.json", "src/index.ts"}
        assert signals.names == {"package.json", "index.ts"}

    def test_root_files_come_before_nested_files(self, tmp_path):
        _touch(tmp_path, "a/package.json", "z.txt", "package.json")
        signals = scan_project(tmp_path)

        assert signals.paths == ("package.json", "z.txt", "a/package.json")

    def test_hidden_files_included(self, tmp_path):
        _touch(tmp_path, ".eslintrc.json", ".github/workflows/ci.yml")
        signals = scan_project(tmp_path)

        assert ".eslintrc.json" in signals.path_set
        assert ".github/workflows/ci.yml" in signals.path_set

    def test_noise_directories_skipped(self, tmp_path):
        _touch(
            tmp_path,
            "node_modules/jest/package.json",
            ".git/HEAD",
            "vendor/lib.go",
            "__pycache__/x.pyc",
            "target/debug/app",
            "src/main.rs",
        )
        signals = scan_project(tmp_path)

        assert signals.paths == ("src/main.rs",)

    def test_depth_is_bounded(self, tmp_path):
        _touch(tmp_path, "a/b/c.txt", "a/b/c/d.txt")
        signals = scan_project(tmp_path)

        assert "a/b/c.txt" in signals.path_set
        assert "a/b/c/d.txt" not in signals.path_set

    def test_custom_depth_and_ignores(self, tmp_path):
        _touch(tmp_path, "top.txt", "dist/bundle.js", "src/app.js")
        signals = scan_project(tmp_path, max_depth=1, ignore_dirs=("dist",))

        assert signals.paths == ("top.txt",)

    def test_custom_ignore_list(self, tmp_path):
        _touch(tmp_path, "dist/bundle.js", "node_modules/x/index.js")
        signals = scan_project(tmp_path, ignore_dirs=("dist",))

        assert signals.paths == ("node_modules/x/index.js",)

    def test_missing_directory(self, tmp_path):
        signals = scan_project(tmp_path / "nope")
        assert signals.paths == ()

    def test_empty_directory(self, tmp_path):
        signals = scan_project(tmp_path)
        assert signals.paths == ()
        assert signals.names == frozenset()
