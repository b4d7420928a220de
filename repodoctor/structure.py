"""Checks on directory layout and essential repository files."""

from __future__ import annotations

from repodoctor import files
from repodoctor.project import Framework, Project
from repodoctor.traits import Analyzer, AnalyzerCategory, Issue, Severity

_REQUIRED_DIRS: dict[Framework, tuple[str, ...]] = {
    Framework.SYMFONY: ("src", "config", "templates"),
    Framework.LARAVEL: ("app", "config", "resources", "routes"),
    Framework.FLUTTER: ("lib", "test"),
    Framework.NEXTJS: ("pages", "public"),
    Framework.RUST_CARGO: ("src",),
    Framework.NODEJS: ("src",),
    Framework.PYTHON: ("src",),
    Framework.UNKNOWN: (),
}

FORBIDDEN_PATHS = ("node_modules", ".env", "dist/credentials")
MAX_DEPTH = 8


def required_dirs(framework: Framework) -> tuple[str, ...]:
    """Directories a project of the given framework is expected to have."""
    return _REQUIRED_DIRS[framework]


class StructureAnalyzer(Analyzer):
    """Analyzes project directory structure and essential files."""

    name = "structure"
    description = "Analyzes project directory structure and essential files"
    category = AnalyzerCategory.STRUCTURE

    def applies_to(self, project: Project) -> bool:
        return True

    def _issue(self, id: str, severity: Severity, title: str, description: str, **extra) -> Issue:
        return Issue(
            id=id,
            analyzer=self.name,
            category=AnalyzerCategory.STRUCTURE,
            severity=severity,
            title=title,
            description=description,
            **extra,
        )

    def analyze(self, project: Project) -> list[Issue]:
        path = project.path
        issues: list[Issue] = []

        for directory in required_dirs(project.framework):
            if not files.path_exists(path, directory):
                issues.append(
                    self._issue(
                        "STR-001",
                        Severity.HIGH,
                        f"Missing required directory: {directory}",
                        f"The '{directory}' directory is expected for {project.framework} projects.",
                        suggestion=f"Create the '{directory}' directory",
                        auto_fixable=True,
                    )
                )

        if not files.path_exists(path, "README.md"):
            issues.append(
                self._issue(
                    "STR-002",
                    Severity.MEDIUM,
                    "Missing README.md",
                    "A README.md file is essential for project documentation.",
                    suggestion="Create a README.md with project description and usage instructions",
                )
            )

        if not files.path_exists(path, ".gitignore"):
            issues.append(
                self._issue(
                    "STR-003",
                    Severity.HIGH,
                    "Missing .gitignore",
                    "A .gitignore file prevents committing unwanted files.",
                    suggestion="Create a .gitignore appropriate for your framework",
                    auto_fixable=True,
                )
            )

        if not files.path_exists(path, "LICENSE") and not files.path_exists(path, "LICENSE.md"):
            issues.append(
                self._issue(
                    "STR-004",
                    Severity.LOW,
                    "Missing LICENSE file",
                    "A LICENSE file clarifies how others can use your code.",
                    suggestion="Add a LICENSE file (MIT, Apache-2.0, etc.)",
                )
            )

        depth = files.max_directory_depth(path)
        if depth > MAX_DEPTH:
            issues.append(
                self._issue(
                    "STR-005",
                    Severity.MEDIUM,
                    f"Excessive directory depth: {depth}",
                    "Deep nesting makes code harder to navigate and maintain.",
                    suggestion="Consider flattening your directory structure (max recommended: 8 levels)",
                )
            )

        for forbidden in FORBIDDEN_PATHS:
            if files.path_exists(path, forbidden):
                issues.append(
                    self._issue(
                        "STR-006",
                        Severity.CRITICAL,
                        f"Forbidden path found: {forbidden}",
                        f"The path '{forbidden}' should not be in the repository.",
                        file=path / forbidden,
                        suggestion=f"Remove '{forbidden}' and add it to .gitignore",
                    )
                )

        return issues