"""Command-line entry point.

Commands:
    detect   [dir] [--json]          Print the detected stack
    generate [-d DIR] [--overwrite]  Render and write docs from detection
    validate [-d DIR]                Check CLAUDE.md and the .claude/ layout

Exit codes: 0 ok, 1 no project detected, 2 validation failed.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from claudenv import __version__
from claudenv.core.config import get_settings
from claudenv.core.logging import configure_structlog
from claudenv.detector import StackDescription, detect_tech_stack
from claudenv.generator import build_default_config, generate_docs, write_docs
from claudenv.validator import (
    ValidationResult,
    cross_reference_check,
    validate_manifest_doc,
    validate_structure,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_PROJECT = 1
EXIT_INVALID = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="claudenv",
        description="Detect a project's stack and generate assistant documentation for it",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    detect_parser = subparsers.add_parser("detect", help="Print the detected tech stack")
    detect_parser.add_argument("dir", nargs="?", default=".", help="Project directory")
    detect_parser.add_argument("--json", action="store_true", help="Emit the full record as JSON")
    detect_parser.set_defaults(func=cmd_detect)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Non-interactive generation from auto-detected defaults",
    )
    generate_parser.add_argument("-d", "--dir", default=".", help="Project directory")
    generate_parser.add_argument("--overwrite", action="store_true", help="Overwrite existing files")
    generate_parser.add_argument("--dry-run", action="store_true", help="Report without writing")
    generate_parser.add_argument(
        "--no-rules", dest="rules", action="store_false", help="Skip .claude/rules/ files"
    )
    generate_parser.add_argument(
        "--no-hooks", dest="hooks", action="store_false", help="Skip .claude/settings.json"
    )
    generate_parser.set_defaults(func=cmd_generate)

    validate_parser = subparsers.add_parser("validate", help="Run documentation checks")
    validate_parser.add_argument("-d", "--dir", default=".", help="Project directory")
    validate_parser.set_defaults(func=cmd_validate)

    return parser


def cmd_detect(args: argparse.Namespace) -> int:
    detected = detect_tech_stack(Path(args.dir).resolve())
    if args.json:
        print(json.dumps(detected.to_dict(), indent=2))
        return EXIT_OK
    if detected.language is None:
        print("No project files detected.")
        return EXIT_NO_PROJECT
    print(f"Detected: {describe_stack(detected)}")
    for label, value in _summary_rows(detected):
        print(f"  {label:<17}{value}")
    return EXIT_OK


def cmd_generate(args: argparse.Namespace) -> int:
    project_dir = Path(args.dir).resolve()
    detected = detect_tech_stack(project_dir)

    if detected.language is None:
        print("No project files detected. Add a manifest (package.json, pyproject.toml, ...) first.",
              file=sys.stderr)
        return EXIT_NO_PROJECT

    print(f"Detected: {describe_stack(detected)}")

    config = build_default_config(
        detected,
        project_dir,
        overrides={"generate_rules": args.rules, "generate_hooks": args.hooks},
    )
    files = generate_docs(config)
    result = write_docs(project_dir, files, overwrite=args.overwrite, dry_run=args.dry_run)

    verb = "Would write" if args.dry_run else "Written"
    if result.written:
        print(f"{verb} {len(result.written)} file(s):")
        for path in result.written:
            print(f"  + {path}")
    if result.skipped:
        print(f"Skipped {len(result.skipped)} existing file(s) (use --overwrite):")
        for path in result.skipped:
            print(f"  ~ {path}")
    return EXIT_OK


def cmd_validate(args: argparse.Namespace) -> int:
    project_dir = Path(args.dir).resolve()
    print("Validating documentation...\n")

    checks = [
        ("CLAUDE.md", validate_manifest_doc(project_dir / "CLAUDE.md")),
        ("Structure", validate_structure(project_dir)),
        ("Cross-references", cross_reference_check(project_dir)),
    ]
    for label, result in checks:
        print_validation(label, result)

    if all(result.valid for _, result in checks):
        print("\nAll checks passed.")
        return EXIT_OK
    print("\nValidation failed.")
    return EXIT_INVALID


def describe_stack(detected: StackDescription) -> str:
    parts = [p for p in (detected.language, detected.framework) if p]
    extras = [
        p for p in (
            detected.package_manager,
            detected.test_framework,
            detected.linter,
            detected.formatter,
        ) if p
    ]
    summary = " + ".join(parts)
    return f"{summary} ({', '.join(extras)})" if extras else summary


def print_validation(label: str, result: ValidationResult) -> None:
    status = "PASS" if result.valid else "FAIL"
    print(f"[{status}] {label}")
    for error in result.errors:
        print(f"  ERROR: {error}")
    for warning in result.warnings:
        print(f"  WARN:  {warning}")


def _summary_rows(detected: StackDescription) -> list[tuple[str, str]]:
    rows = [
        ("Runtime:", detected.runtime),
        ("Framework:", detected.framework),
        ("Package manager:", detected.package_manager),
        ("Build tool:", detected.build_tool),
        ("Test framework:", detected.test_framework),
        ("Linter:", detected.linter),
        ("Formatter:", detected.formatter),
        ("CI/CD:", detected.ci),
        ("Monorepo:", detected.monorepo),
        ("Containerized:", "yes" if detected.containerized else None),
    ]
    return [(label, value) for label, value in rows if value]


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    configure_structlog(debug=args.verbose or settings.debug, json_output=settings.log_json)
    logger.debug("Running %s", args.command)

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
