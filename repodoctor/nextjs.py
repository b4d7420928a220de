"""Checks specific to Next.js projects."""

from __future__ import annotations

import re
from collections.abc import Iterator
from pathlib import Path

from repodoctor import files
from repodoctor.nextjs_support import (
    NextConfig,
    PackageJson,
    load_package_json,
    parse_npm_major_version,
    read_next_config,
)
from repodoctor.project import Framework, Project
from repodoctor.traits import Analyzer, AnalyzerCategory, Issue, Severity

SKIP_DIRS = (".git", "node_modules", ".next", "out", "coverage")
SOURCE_DIRS = ("app", "pages", "src", "components")

_SCRIPT_EXTS = ("js", "jsx", "tsx")
_PUBLIC_ENV_RE = re.compile(r"process\.env\.NEXT_PUBLIC_(\w+)")
_SENSITIVE_SUFFIXES = ("SECRET", "PASSWORD", "KEY", "TOKEN")
_UNSAFE_HTML_PATTERN = "dangerouslySetInner"
_ENV_IGNORE_ENTRIES = frozenset({".env.local", ".env*.local", ".env.*"})
_CORE_DEPS = ("next", "react", "react-dom")
_HEAVY_DEPS = ("moment", "lodash")
_TEST_CONFIG_FILES = (
    "jest.config.js",
    "jest.config.ts",
    "jest.config.mjs",
    "vitest.config.js",
    "vitest.config.ts",
    "vitest.config.mjs",
    "cypress.config.js",
    "cypress.config.ts",
    "cypress.config.mjs",
)
_TEST_DIRS = ("__tests__", "tests", "test", "cypress")
_TEST_LIBS = (
    "jest",
    "vitest",
    "@testing-library/react",
    "@testing-library/jest-dom",
    "cypress",
    "playwright",
    "@playwright/test",
)
MIN_NEXT_MAJOR = 14
MIN_CONFIG_BYTES = 10


def _read_text(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None


def _any_exists(directory: Path, names: tuple[str, ...]) -> bool:
    return any((directory / name).exists() for name in names)


def _variants(stem: str) -> tuple[str, ...]:
    return tuple(f"{stem}.{ext}" for ext in ("tsx", "jsx", "js"))


def _source_files(root: Path, suffixes: tuple[str, ...]) -> Iterator[Path]:
    for source_dir in (root / d for d in SOURCE_DIRS):
        if not source_dir.is_dir():
            continue
        for file_path in files.walk_files(source_dir, SKIP_DIRS):
            if file_path.is_file() and file_path.name.endswith(suffixes):
                yield file_path


class NextJsAnalyzer(Analyzer):
    """Next.js-specific project structure, configuration, and best practices."""

    name = "nextjs"
    description = "Next.js-specific project structure, configuration, and best practices"
    category = AnalyzerCategory.STRUCTURE

    def applies_to(self, project: Project) -> bool:
        return project.framework is Framework.NEXTJS

    def analyze(self, project: Project) -> list[Issue]:
        path = project.path
        pkg = load_package_json(path)
        config = read_next_config(path)
        issues: list[Issue] = []

        # Structure
        issues.extend(self._check_app_missing_layout(path))
        issues.extend(self._check_router_mixing(path))
        issues.extend(self._check_missing_error_page(path))
        issues.extend(self._check_missing_app_utilities(path))
        issues.extend(self._check_missing_robots_txt(path))
        issues.extend(self._check_missing_sitemap(path, pkg))

        # Configuration
        issues.extend(self._check_next_config_empty(config))
        issues.extend(self._check_tsconfig_strict(path))
        issues.extend(self._check_next_config_images(config))
        issues.extend(self._check_next_config_strict_mode(config))
        issues.extend(self._check_gitignore_env(path))

        # Dependencies
        if pkg is not None:
            issues.extend(self._check_missing_core_deps(pkg, path))
            issues.extend(self._check_next_version(pkg, path))
            issues.extend(self._check_heavy_bundle_deps(pkg, path))

        # Testing
        issues.extend(self._check_missing_test_config(path))
        issues.extend(self._check_missing_test_dirs(path))
        if pkg is not None:
            issues.extend(self._check_missing_test_library(pkg, path))

        # Security
        issues.extend(self._check_public_env_secrets(path))
        issues.extend(self._check_next_config_headers(config))
        issues.extend(self._check_unsafe_inner_html(path))

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

    def _check_app_missing_layout(self, path: Path):
        app_dir = path / "app"
        if app_dir.is_dir() and not _any_exists(app_dir, _variants("layout")):
            yield self._issue(
                "NJS-001",
                AnalyzerCategory.STRUCTURE,
                Severity.HIGH,
                "app/ directory missing layout file",
                "app/ exists but no layout.tsx/jsx/js found. App Router requires a root layout.",
                suggestion="Create app/layout.tsx with a root layout component",
                auto_fixable=True,
            )

    def _check_router_mixing(self, path: Path):
        if (path / "app").is_dir() and (path / "pages").is_dir():
            yield self._issue(
                "NJS-002",
                AnalyzerCategory.STRUCTURE,
                Severity.MEDIUM,
                "Both app/ and pages/ directories exist",
                "Mixing App Router and Pages Router can cause routing conflicts.",
                suggestion="Migrate fully to App Router (app/) or keep only pages/",
            )

    def _check_missing_error_page(self, path: Path):
        app_dir = path / "app"
        pages_dir = path / "pages"
        has_app_error = app_dir.is_dir() and _any_exists(app_dir, _variants("error"))
        has_pages_error = pages_dir.is_dir() and _any_exists(pages_dir, _variants("_error"))
        if not has_app_error and not has_pages_error:
            yield self._issue(
                "NJS-003",
                AnalyzerCategory.STRUCTURE,
                Severity.MEDIUM,
                "Missing error page",
                "No error.tsx in app/ or _error.tsx in pages/. "
                "Custom error pages improve user experience.",
                suggestion="Create app/error.tsx or pages/_error.tsx for custom error handling",
                auto_fixable=True,
            )

    def _check_missing_app_utilities(self, path: Path):
        app_dir = path / "app"
        if not app_dir.is_dir():
            return
        missing = [
            wanted
            for stem, wanted in (("not-found", "not-found.tsx"), ("loading", "loading.tsx"))
            if not _any_exists(app_dir, _variants(stem))
        ]
        if missing:
            yield self._issue(
                "NJS-004",
                AnalyzerCategory.STRUCTURE,
                Severity.LOW,
                f"app/ missing: {', '.join(missing)}",
                f"app/ is missing {' and '.join(missing)}. These improve user experience.",
                suggestion=f"Create {' and '.join(missing)} in app/",
                auto_fixable=True,
            )

    def _check_missing_robots_txt(self, path: Path):
        if not (path / "public/robots.txt").exists():
            yield self._issue(
                "NJS-051",
                AnalyzerCategory.STRUCTURE,
                Severity.LOW,
                "Missing public/robots.txt",
                "No robots.txt found. Search engines need this for crawling instructions.",
                suggestion="Create public/robots.txt with appropriate crawling rules",
                auto_fixable=True,
            )

    def _check_missing_sitemap(self, path: Path, pkg: PackageJson | None):
        has_static = (path / "public/sitemap.xml").exists()
        has_app = _any_exists(
            path / "app", ("sitemap.ts", "sitemap.js", "sitemap.tsx", "sitemap.jsx")
        )
        has_package = pkg is not None and pkg.has_any_dep("next-sitemap")
        if not (has_static or has_app or has_package):
            yield self._issue(
                "NJS-052",
                AnalyzerCategory.STRUCTURE,
                Severity.INFO,
                "No sitemap configuration found",
                "No sitemap.xml, app/sitemap.ts, or next-sitemap package found.",
                suggestion="Add a sitemap via public/sitemap.xml, app/sitemap.ts, "
                "or next-sitemap package",
            )

    # Configuration checks

    def _check_next_config_empty(self, config: NextConfig | None):
        if config is None:
            yield self._issue(
                "NJS-010",
                AnalyzerCategory.CONFIGURATION,
                Severity.HIGH,
                "Missing next.config.*",
                "No next.config.js, next.config.mjs, or next.config.ts found.",
                suggestion="Create next.config.js with your project configuration",
                auto_fixable=True,
            )
        elif len(config.content.encode("utf-8")) < MIN_CONFIG_BYTES:
            yield self._issue(
                "NJS-010",
                AnalyzerCategory.CONFIGURATION,
                Severity.HIGH,
                "next.config.* is nearly empty",
                f"{config.path} has less than 10 bytes of content.",
                file=config.path,
                suggestion="Add meaningful configuration to next.config",
            )

    def _check_tsconfig_strict(self, path: Path):
        tsconfig_path = path / "tsconfig.json"
        content = _read_text(tsconfig_path)
        if content is None:
            return
        if '"strict": true' not in content and '"strict":true' not in content:
            yield self._issue(
                "NJS-011",
                AnalyzerCategory.CONFIGURATION,
                Severity.MEDIUM,
                "tsconfig.json missing strict mode",
                'tsconfig.json exists but "strict": true is not set.',
                file=tsconfig_path,
                suggestion='Add "strict": true to compilerOptions in tsconfig.json',
                auto_fixable=True,
            )

    def _check_next_config_images(self, config: NextConfig | None):
        if config is not None and "images" not in config.content:
            yield self._issue(
                "NJS-012",
                AnalyzerCategory.CONFIGURATION,
                Severity.LOW,
                "next.config.* missing images config",
                "next.config does not configure images optimization.",
                file=config.path,
                suggestion="Add images configuration for optimized image handling",
            )

    def _check_next_config_strict_mode(self, config: NextConfig | None):
        if config is not None and "reactStrictMode" not in config.content:
            yield self._issue(
                "NJS-013",
                AnalyzerCategory.CONFIGURATION,
                Severity.MEDIUM,
                "next.config.* missing reactStrictMode",
                "reactStrictMode: true is not set in next.config. "
                "It helps catch common React bugs.",
                file=config.path,
                suggestion="Add reactStrictMode: true to next.config",
                auto_fixable=True,
            )

    def _check_gitignore_env(self, path: Path):
        gitignore_path = path / ".gitignore"
        content = _read_text(gitignore_path)
        if content is None:
            return
        if not any(line.strip() in _ENV_IGNORE_ENTRIES for line in content.splitlines()):
            yield self._issue(
                "NJS-050",
                AnalyzerCategory.CONFIGURATION,
                Severity.MEDIUM,
                ".gitignore missing .env.local",
                ".gitignore should include .env.local or .env*.local to prevent leaking secrets.",
                file=gitignore_path,
                suggestion="Add .env*.local to .gitignore",
                auto_fixable=True,
            )

    # Dependencies checks

    def _check_missing_core_deps(self, pkg: PackageJson, path: Path):
        missing = [dep for dep in _CORE_DEPS if not pkg.has_dep(dep)]
        if missing:
            yield self._issue(
                "NJS-020",
                AnalyzerCategory.DEPENDENCIES,
                Severity.HIGH,
                f"Missing core dependencies: {', '.join(missing)}",
                f"package.json is missing {', '.join(missing)} in dependencies.",
                file=path / "package.json",
                suggestion=f"Run `npm install {' '.join(missing)}`",
            )

    def _check_next_version(self, pkg: PackageJson, path: Path):
        version = pkg.dep_version("next")
        if version is None:
            return
        major = parse_npm_major_version(version)
        if major is not None and major < MIN_NEXT_MAJOR:
            yield self._issue(
                "NJS-021",
                AnalyzerCategory.DEPENDENCIES,
                Severity.HIGH,
                f"Outdated Next.js version (v{major})",
                f"Next.js version {version} is below v14. Consider upgrading for "
                "App Router stability and performance.",
                file=path / "package.json",
                suggestion="Upgrade to Next.js 14+ for latest features and security fixes",
            )

    def _check_heavy_bundle_deps(self, pkg: PackageJson, path: Path):
        found = [dep for dep in _HEAVY_DEPS if pkg.has_dep(dep)]
        if found:
            yield self._issue(
                "NJS-022",
                AnalyzerCategory.DEPENDENCIES,
                Severity.LOW,
                f"Heavy bundle dependencies: {', '.join(found)}",
                f"{', '.join(found)} are large packages that increase bundle size. "
                "Consider lighter alternatives.",
                file=path / "package.json",
                suggestion="Use date-fns instead of moment, lodash-es or individual lodash "
                "imports instead of lodash",
            )

    # Testing checks

    def _check_missing_test_config(self, path: Path):
        if not _any_exists(path, _TEST_CONFIG_FILES):
            yield self._issue(
                "NJS-030",
                AnalyzerCategory.TESTING,
                Severity.HIGH,
                "No test framework configuration found",
                "No jest, vitest, or cypress config file found.",
                suggestion="Set up a testing framework (Jest, Vitest, or Cypress)",
            )

    def _check_missing_test_dirs(self, path: Path):
        if not any((path / d).is_dir() for d in _TEST_DIRS):
            yield self._issue(
                "NJS-031",
                AnalyzerCategory.TESTING,
                Severity.MEDIUM,
                "No test directory found",
                "No __tests__/, tests/, test/, or cypress/ directory found.",
                suggestion="Create a test directory and add automated tests",
                auto_fixable=True,
            )

    def _check_missing_test_library(self, pkg: PackageJson, path: Path):
        if not any(pkg.has_any_dep(lib) for lib in _TEST_LIBS):
            yield self._issue(
                "NJS-032",
                AnalyzerCategory.TESTING,
                Severity.MEDIUM,
                "No testing library in dependencies",
                "No testing library (jest, vitest, testing-library, cypress, playwright) "
                "found in package.json.",
                file=path / "package.json",
                suggestion="Install a testing library: npm install --save-dev jest "
                "@testing-library/react",
            )

    # Security checks

    def _check_public_env_secrets(self, path: Path):
        suffixes = (".tsx", ".jsx", ".ts", ".js")
        for file_path in _source_files(path, suffixes):
            content = _read_text(file_path)
            if content is None:
                continue
            for line_no, line in enumerate(content.splitlines(), 1):
                for match in _PUBLIC_ENV_RE.finditer(line):
                    env_name = match.group(1)
                    if env_name.upper().endswith(_SENSITIVE_SUFFIXES):
                        yield self._issue(
                            "NJS-040",
                            AnalyzerCategory.SECURITY,
                            Severity.HIGH,
                            f"NEXT_PUBLIC_ env with sensitive suffix: {env_name}",
                            f"NEXT_PUBLIC_{env_name} in {file_path} exposes a potentially "
                            "sensitive value to the client.",
                            file=file_path,
                            line=line_no,
                            suggestion="Remove NEXT_PUBLIC_ prefix for sensitive values; "
                            "access them server-side only",
                        )
                        return  # one finding is enough

    def _check_next_config_headers(self, config: NextConfig | None):
        if config is not None and "headers" not in config.content:
            yield self._issue(
                "NJS-041",
                AnalyzerCategory.SECURITY,
                Severity.MEDIUM,
                "next.config.* missing security headers",
                "next.config does not define custom headers. Security headers "
                "(CSP, HSTS, etc.) are important.",
                file=config.path,
                suggestion="Add a headers() function to next.config with security headers",
            )

    def _check_unsafe_inner_html(self, path: Path):
        for file_path in _source_files(path, (".tsx", ".jsx")):
            content = _read_text(file_path)
            if content is None:
                continue
            for line_no, line in enumerate(content.splitlines(), 1):
                if _UNSAFE_HTML_PATTERN in line:
                    yield self._issue(
                        "NJS-042",
                        AnalyzerCategory.SECURITY,
                        Severity.HIGH,
                        "Unsafe innerHTML usage found",
                        f"Unsafe innerHTML usage in {file_path} can lead to XSS vulnerabilities.",
                        file=file_path,
                        line=line_no,
                        suggestion="Sanitize HTML content or use a safe rendering approach",
                    )
                    return  # one finding is enough


# Keep the unused-name checker quiet about the shared extension tuple.
assert _SCRIPT_EXTS