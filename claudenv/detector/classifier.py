"""Stack classifier: the ordered detection phases.

Each phase takes the signal set and the description built so far and
returns a new description. The order below is load-bearing: later phases
read fields set by earlier ones (dialect promotion needs the language,
the package manager fallback needs the runtime, build tool inference
needs the framework), and a phase never re-runs or resets another
phase's result.

Every table scan is first-match in declaration order, except CI (all
paths of the winning pattern are recorded) and infra (exhaustive).
Phases here do no logging and raise nothing; the only file reads happen
through manifests.py, which turns failures into None.
"""

from dataclasses import replace
from pathlib import Path

from claudenv.detector import manifests
from claudenv.detector.signals import (
    CI_PATTERNS,
    COMPOSE_INDICATOR_PREFIX,
    CONTAINER_INDICATOR,
    DEFAULT_PACKAGE_MANAGERS,
    FORMATTER_SIGNALS,
    FRAMEWORK_BUILD_TOOLS,
    FRAMEWORK_SIGNALS,
    INFRA_SIGNALS,
    LINTER_SIGNALS,
    MANIFEST_SIGNALS,
    MONOREPO_SIGNALS,
    PACKAGE_MANAGER_SIGNALS,
    RUNTIME_BUILD_TOOLS,
    TEST_FRAMEWORK_SIGNALS,
    TYPESCRIPT_INDICATORS,
    lookup,
)
from claudenv.detector.types import FileSignals, StackDescription


def classify(project_dir: Path, signals: FileSignals) -> StackDescription:
    """Run detection phases 1 through 10 over a signal set."""
    desc = StackDescription()
    desc = detect_language(signals, desc)
    desc = promote_dialect(signals, desc)
    desc = detect_framework(signals, desc)
    desc = detect_package_manager(signals, desc)
    desc = detect_test_framework(project_dir, signals, desc)
    desc = detect_ci(signals, desc)
    desc = detect_linter(signals, desc)
    desc = detect_formatter(signals, desc)
    desc = detect_monorepo(signals, desc)
    desc = detect_infra(signals, desc)
    desc = infer_build_tool(desc)
    return desc


# ---------------------------------------------------------------------------
# Phases
# ---------------------------------------------------------------------------

def detect_language(signals: FileSignals, desc: StackDescription) -> StackDescription:
    for pattern, (language, runtime) in MANIFEST_SIGNALS:
        if pattern.startswith("*"):
            match = signals.first_with_suffix(pattern[1:])
        elif signals.has(pattern):
            match = signals.first_named(pattern)
        else:
            continue
        if match is None:
            continue

        desc = desc.promote(language=language, runtime=runtime)
        return desc.with_provenance(manifests=(match,))
    return desc


def promote_dialect(signals: FileSignals, desc: StackDescription) -> StackDescription:
    """javascript -> typescript when a tsconfig is present. Nothing else is promoted."""
    if desc.language != "javascript":
        return desc
    if any(signals.has(indicator) for indicator in TYPESCRIPT_INDICATORS):
        return replace(desc, language="typescript")
    return desc


def detect_framework(signals: FileSignals, desc: StackDescription) -> StackDescription:
    for filename, framework in FRAMEWORK_SIGNALS:
        if signals.has(filename):
            desc = desc.promote(framework=framework)
            match = signals.first_named(filename)
            return desc.with_provenance(configs=(match,)) if match else desc
    return desc


def detect_package_manager(signals: FileSignals, desc: StackDescription) -> StackDescription:
    for lockfile, package_manager in PACKAGE_MANAGER_SIGNALS:
        if lockfile in signals.names:
            return desc.promote(package_manager=package_manager)

    if desc.runtime:
        return desc.promote(package_manager=lookup(DEFAULT_PACKAGE_MANAGERS, desc.runtime))
    return desc


def detect_test_framework(
    project_dir: Path,
    signals: FileSignals,
    desc: StackDescription,
) -> StackDescription:
    for filename, framework in TEST_FRAMEWORK_SIGNALS:
        if signals.has(filename):
            return desc.promote(test_framework=framework)

    if manifests.PACKAGE_JSON in signals.path_set:
        pkg = manifests.read_package_json(project_dir)
        return desc.promote(test_framework=manifests.detect_test_dependency(pkg))
    return desc


def detect_ci(signals: FileSignals, desc: StackDescription) -> StackDescription:
    for pattern, provider in CI_PATTERNS:
        matching = tuple(p for p in signals.paths if _matches_ci_pattern(p, pattern))
        if matching:
            desc = desc.promote(ci=provider)
            return desc.with_provenance(ci=matching)
    return desc


def detect_linter(signals: FileSignals, desc: StackDescription) -> StackDescription:
    for filename, linter in LINTER_SIGNALS:
        if filename in signals.names:
            return desc.promote(linter=linter)
    return desc


def detect_formatter(signals: FileSignals, desc: StackDescription) -> StackDescription:
    for filename, formatter in FORMATTER_SIGNALS:
        # Unlabelled entries are settled during manifest introspection
        if formatter and filename in signals.names:
            return desc.promote(formatter=formatter)
    return desc


def detect_monorepo(signals: FileSignals, desc: StackDescription) -> StackDescription:
    for filename, tool in MONOREPO_SIGNALS:
        if filename in signals.names:
            return desc.promote(monorepo=tool)
    return desc


def detect_infra(signals: FileSignals, desc: StackDescription) -> StackDescription:
    tools: list[str] = []
    containerized = desc.containerized

    for indicator, tool in INFRA_SIGNALS:
        if indicator.startswith("*"):
            if signals.first_with_suffix(indicator[1:]) is not None:
                tools.append(tool)
        elif indicator.endswith("/"):
            if any(p.startswith(indicator) for p in signals.paths):
                tools.append(tool)
        elif signals.has(indicator):
            tools.append(tool)
            if indicator == CONTAINER_INDICATOR or indicator.startswith(COMPOSE_INDICATOR_PREFIX):
                containerized = True

    if not tools:
        return desc
    desc = desc.with_provenance(infra=tuple(tools))
    return replace(desc, containerized=containerized)


def infer_build_tool(desc: StackDescription) -> StackDescription:
    """Derived only: framework build tool, else the runtime's own toolchain."""
    if desc.framework:
        return desc.promote(
            build_tool=lookup(FRAMEWORK_BUILD_TOOLS, desc.framework) or desc.framework
        )
    if desc.runtime:
        return desc.promote(build_tool=lookup(RUNTIME_BUILD_TOOLS, desc.runtime))
    return desc


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _matches_ci_pattern(path: str, pattern: str) -> bool:
    if "*" not in pattern:
        return path == pattern
    prefix = pattern.split("*")[0]
    suffix = pattern.split("*")[-1]
    return path.startswith(prefix) and path.endswith(suffix)
