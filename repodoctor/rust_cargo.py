"""Checks specific to Rust projects built with Cargo."""

from __future__ import annotations

import re
from pathlib import Path

from repodoctor import files
from repodoctor.project import Framework, Project
from repodoctor.traits import Analyzer, AnalyzerCategory, Issue, Severity

_EDITION_RE = re.compile(r'edition\s*=\s*"(\d+)"')
_UNSAFE_RE = re.compile(r"unsafe\s*\{")
_TARGET_ENTRIES = frozenset({"target/", "/target/", "target"})
MIN_EDITION = 2021


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


class RustCargoAnalyzer(Analyzer):
    """Rust/Cargo-specific project structure, configuration, and best practices."""

    name = "rust_cargo"
    description = "Rust/Cargo-specific project structure, configuration, and best practices"
    category = AnalyzerCategory.STRUCTURE

    def applies_to(self, project: Project) -> bool:
        return project.framework is Framework.RUST_CARGO

    def analyze(self, project: Project) -> list[Issue]:
        path = project.path
        issues: list[Issue] = []
        for check in (
            self._check_missing_entry_point,
            self._check_missing_clippy_config,
            self._check_missing_rustfmt_config,
            self._check_outdated_edition,
            self._check_missing_cargo_lock,
            self._check_missing_tests_dir,
            self._check_unsafe_blocks,
            self._check_gitignore_entries,
        ):
            issues.extend(check(path))
        return issues

    def _issue(
        self,
        id: str,
        category: AnalyzerCategory,
        severity: Severity,
        title: str,
        description: str,
        **extra,
    ) -> Issue:
        return Issue(
            id=id,
            analyzer=self.name,
            category=category,
            severity=severity,
            title=title,
            description=description,
            **extra,
        )

    # Structure checks

    def _check_missing_entry_point(self, path: Path):
        if not (path / "src/main.rs").exists() and not (path / "src/lib.rs").exists():
            yield self._issue(
                "RST-001",
                AnalyzerCategory.STRUCTURE,
                Severity.HIGH,
                "Missing src/main.rs or src/lib.rs",
                "Rust projects need either src/main.rs (binary) or src/lib.rs (library) "
                "as an entry point.",
                suggestion="Create src/main.rs for a binary crate or src/lib.rs for a library crate",
                auto_fixable=True,
            )

    def _check_missing_clippy_config(self, path: Path):
        if not (path / "clippy.toml").exists() and not (path / ".clippy.toml").exists():
            yield self._issue(
                "RST-002",
                AnalyzerCategory.CONFIGURATION,
                Severity.LOW,
                "Missing clippy configuration",
                "No clippy.toml or .clippy.toml found. Clippy configuration helps enforce "
                "consistent lint rules.",
                suggestion="Create clippy.toml to configure Clippy lints for your project",
            )

    def _check_missing_rustfmt_config(self, path: Path):
        if not (path / "rustfmt.toml").exists() and not (path / ".rustfmt.toml").exists():
            yield self._issue(
                "RST-003",
                AnalyzerCategory.CONFIGURATION,
                Severity.LOW,
                "Missing rustfmt configuration",
                "No rustfmt.toml or .rustfmt.toml found. A consistent code style helps readability.",
                suggestion="Create rustfmt.toml to configure code formatting rules",
            )

    # Configuration checks

    def _check_outdated_edition(self, path: Path):
        cargo_path = path / "Cargo.toml"
        content = _read_text(cargo_path)
        if content is None:
            return
        match = _EDITION_RE.search(content)
        if match is None:
            yield self._issue(
                "RST-010",
                AnalyzerCategory.CONFIGURATION,
                Severity.MEDIUM,
                "Missing Rust edition in Cargo.toml",
                "No edition specified in Cargo.toml. Without it, the 2015 edition is used by default.",
                file=cargo_path,
                suggestion='Add edition = "2021" to [package] in Cargo.toml',
            )
            return
        year = int(match.group(1))
        if year < MIN_EDITION:
            yield self._issue(
                "RST-010",
                AnalyzerCategory.CONFIGURATION,
                Severity.MEDIUM,
                f"Outdated Rust edition ({year})",
                f"Cargo.toml specifies edition {year}. Consider upgrading to 2021 or later.",
                file=cargo_path,
                suggestion='Update edition to "2021" in Cargo.toml',
            )

    def _check_missing_cargo_lock(self, path: Path):
        # Only binaries are expected to commit their lock file.
        if (path / "src/main.rs").exists() and not (path / "Cargo.lock").exists():
            yield self._issue(
                "RST-011",
                AnalyzerCategory.CONFIGURATION,
                Severity.MEDIUM,
                "Missing Cargo.lock for binary crate",
                "Binary crates should commit Cargo.lock for reproducible builds.",
                suggestion="Run `cargo build` and commit the generated Cargo.lock",
            )

    # Testing checks

    def _check_missing_tests_dir(self, path: Path):
        if not (path / "tests").is_dir():
            yield self._issue(
                "RST-020",
                AnalyzerCategory.TESTING,
                Severity.MEDIUM,
                "No integration tests directory",
                "No tests/ directory found. Consider adding integration tests.",
                suggestion="Create a tests/ directory for integration tests",
                auto_fixable=True,
            )

    # Security checks

    def _check_unsafe_blocks(self, path: Path):
        src_dir = path / "src"
        if not src_dir.is_dir():
            return
        for file_path in files.find_files_with_extension(src_dir, "rs"):
            content = _read_text(file_path)
            if content is None:
                continue
            line_no = next(
                (n for n, line in enumerate(content.splitlines(), 1) if _UNSAFE_RE.search(line)),
                None,
            )
            if line_no is not None:
                yield self._issue(
                    "RST-030",
                    AnalyzerCategory.SECURITY,
                    Severity.HIGH,
                    "Unsafe code block detected",
                    f"unsafe block found in {file_path}. Ensure unsafe code is justified and reviewed.",
                    file=file_path,
                    line=line_no,
                    suggestion="Review unsafe code for soundness or replace with safe alternatives",
                )

    # Best practices

    def _check_gitignore_entries(self, path: Path):
        gitignore_path = path / ".gitignore"
        content = _read_text(gitignore_path)
        if content is None:
            return
        if not any(line.strip() in _TARGET_ENTRIES for line in content.splitlines()):
            yield self._issue(
                "RST-040",
                AnalyzerCategory.STRUCTURE,
                Severity.MEDIUM,
                ".gitignore missing: target/",
                ".gitignore should include target/ for Rust projects.",
                file=gitignore_path,
                suggestion="Add target/ to .gitignore",
                auto_fixable=True,
            )