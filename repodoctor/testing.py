"""Checks on testing setup, configuration and test coverage."""

from __future__ import annotations

import os
from pathlib import Path

from repodoctor import files
from repodoctor.project import Framework, Project
from repodoctor.traits import Analyzer, AnalyzerCategory, Issue, Severity

_TEST_DIRS: dict[Framework, tuple[str, ...]] = {
    Framework.SYMFONY: ("tests",),
    Framework.LARAVEL: ("tests",),
    Framework.FLUTTER: ("test",),
    Framework.NEXTJS: ("__tests__", "tests", "test", "spec"),
    Framework.NODEJS: ("__tests__", "tests", "test", "spec"),
    Framework.RUST_CARGO: ("tests",),
    Framework.PYTHON: ("tests", "test"),
    Framework.UNKNOWN: ("tests", "test", "__tests__", "spec"),
}

_JS_TEST_CONFIGS = (
    "jest.config.js",
    "jest.config.ts",
    "vitest.config.js",
    "vitest.config.ts",
    ".mocharc.yml",
    ".mocharc.json",
)

_TEST_CONFIGS: dict[Framework, tuple[str, ...]] = {
    Framework.SYMFONY: ("phpunit.xml", "phpunit.xml.dist"),
    Framework.LARAVEL: ("phpunit.xml", "phpunit.xml.dist"),
    Framework.FLUTTER: ("test",),
    Framework.NEXTJS: _JS_TEST_CONFIGS,
    Framework.NODEJS: _JS_TEST_CONFIGS,
    Framework.RUST_CARGO: (),
    Framework.PYTHON: ("pytest.ini", "pyproject.toml", "setup.cfg", "tox.ini"),
    Framework.UNKNOWN: (),
}

_JS_EXTENSIONS = frozenset({"js", "ts", "jsx", "tsx"})

_EXTENSIONS: dict[Framework, frozenset[str]] = {
    Framework.SYMFONY: frozenset({"php"}),
    Framework.LARAVEL: frozenset({"php"}),
    Framework.FLUTTER: frozenset({"dart"}),
    Framework.NEXTJS: _JS_EXTENSIONS,
    Framework.NODEJS: _JS_EXTENSIONS,
    Framework.RUST_CARGO: frozenset({"rs"}),
    Framework.PYTHON: frozenset({"py"}),
    Framework.UNKNOWN: frozenset({"rs", "py", "js", "ts", "php", "dart"}),
}

SOURCE_DIRS = ("src", "lib", "app")
MIN_TEST_RATIO = 0.2


def test_dirs(framework: Framework) -> tuple[str, ...]:
    """Directories where tests are expected for the given framework."""
    return _TEST_DIRS[framework]


def test_configs(framework: Framework) -> tuple[str, ...]:
    """Test configuration files expected for the given framework."""
    return _TEST_CONFIGS[framework]


def _count_files(root: Path, directories: tuple[str, ...], extensions: frozenset[str]) -> int:
    return sum(
        1
        for directory in directories
        if (root / directory).is_dir()
        for path in files.walk_files(root / directory)
        if path.suffix[1:] in extensions and path.is_file()
    )


def count_source_files(path: str | os.PathLike, framework: Framework) -> int:
    """Number of source files of the framework's languages under src/, lib/ and app/."""
    return _count_files(Path(path), SOURCE_DIRS, _EXTENSIONS[framework])


def count_test_files(path: str | os.PathLike, framework: Framework) -> int:
    """Number of source files of the framework's languages in its test directories."""
    return _count_files(Path(path), test_dirs(framework), _EXTENSIONS[framework])


class TestingAnalyzer(Analyzer):
    """Checks testing setup, configuration, and coverage."""

    __test__ = False

    name = "testing"
    description = "Checks testing setup, configuration, and coverage"
    category = AnalyzerCategory.TESTING

    def applies_to(self, project: Project) -> bool:
        return True

    def _issue(self, id: str, severity: Severity, title: str, description: str, suggestion: str) -> Issue:
        return Issue(
            id=id,
            analyzer=self.name,
            category=AnalyzerCategory.TESTING,
            severity=severity,
            title=title,
            description=description,
            suggestion=suggestion,
        )

    def analyze(self, project: Project) -> list[Issue]:
        path = project.path
        framework = project.framework
        issues: list[Issue] = []

        dirs = test_dirs(framework)
        has_test_dir = any(files.path_exists(path, d) for d in dirs)
        if not has_test_dir:
            issues.append(
                self._issue(
                    "TST-001",
                    Severity.HIGH,
                    "No test directory found",
                    f"Expected one of: {', '.join(dirs)}",
                    f"Create a {dirs[0]} directory with test files",
                )
            )

        configs = test_configs(framework)
        if configs and not any(files.path_exists(path, c) for c in configs):
            issues.append(
                self._issue(
                    "TST-002",
                    Severity.MEDIUM,
                    "No test configuration found",
                    f"Expected one of: {', '.join(configs)}",
                    "Add a test configuration file for your testing framework",
                )
            )

        source_count = count_source_files(path, framework)
        test_count = count_test_files(path, framework)

        if source_count > 0 and has_test_dir:
            if test_count == 0:
                issues.append(
                    self._issue(
                        "TST-003",
                        Severity.HIGH,
                        "Test directory exists but contains no test files",
                        f"Found {source_count} source files but 0 test files.",
                        "Add test files to cover your source code",
                    )
                )
            else:
                ratio = test_count / source_count
                if ratio < MIN_TEST_RATIO:
                    issues.append(
                        self._issue(
                            "TST-004",
                            Severity.MEDIUM,
                            "Low test-to-source file ratio",
                            f"Found {test_count} test files for {source_count} source files "
                            f"(ratio: {ratio * 100.0:.0f}%). Consider adding more tests.",
                            "Aim for at least 1 test file per 3 source files",
                        )
                    )

        return issues