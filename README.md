# repodoctor

A library for diagnosing the health of a source repository. Analyzers inspect a
project directory and report issues about its structure, testing setup,
configuration, dependencies and security.

## Installation

```
pip install .
```

## Analyzers

Each analyzer is a subclass of `repodoctor.traits.Analyzer` with a `name`, a
`description`, a `category`, an `applies_to(project)` method and an
`analyze(project)` method that returns a list of `Issue` objects.

- `StructureAnalyzer` (`repodoctor.structure`): required directories for the
  project's framework (see `required_dirs(framework)`), README.md, .gitignore,
  LICENSE or LICENSE.md, directory depth above 8 levels, and the paths
  `node_modules`, `.env` and `dist/credentials` (`STR-*`). Applies to every
  project.
- `TestingAnalyzer` (`repodoctor.testing`): test directories, test
  configuration files and the ratio of test files to source files (`TST-*`).
  Applies to every project. The module also offers `test_dirs`,
  `test_configs`, `count_source_files` and `count_test_files`.
- `RustCargoAnalyzer` (`repodoctor.rust_cargo`): entry points, Clippy and
  rustfmt configuration, edition in Cargo.toml, Cargo.lock for binaries, a
  tests/ directory, `unsafe` blocks under src/ and a `target/` entry in
  .gitignore (`RST-*`). Applies to projects whose framework is
  `Framework.RUST_CARGO`.
- `NextJsAnalyzer` (`repodoctor.nextjs`): App/Pages router layout, error,
  not-found and loading pages, robots.txt and sitemap, next.config and
  tsconfig settings, .env.local in .gitignore, core and heavy dependencies,
  test tooling, `NEXT_PUBLIC_` variables with sensitive names, missing
  security headers and raw HTML injection (`NJS-*`). Applies to projects whose
  framework is `Framework.NEXTJS`.

## Usage

```python
from pathlib import Path

from repodoctor.project import Framework, Project
from repodoctor.structure import StructureAnalyzer
from repodoctor.testing import TestingAnalyzer
from repodoctor.rust_cargo import RustCargoAnalyzer
from repodoctor.nextjs import NextJsAnalyzer

project = Project(path=Path("."), framework=Framework.RUST_CARGO)
analyzers = [StructureAnalyzer(), TestingAnalyzer(), RustCargoAnalyzer(), NextJsAnalyzer()]

issues = [
    issue
    for analyzer in analyzers
    if analyzer.applies_to(project)
    for issue in analyzer.analyze(project)
]

for issue in issues:
    print(f"[{issue.severity}] {issue.id} {issue.title}")
```

`Project` takes a path and a `Framework` (default `Framework.UNKNOWN`).

Every `Issue` carries an id, the analyzer name, an `AnalyzerCategory`, a
`Severity`, a title and description, and optionally a file, a line number, a
suggestion, an `auto_fixable` flag and a list of references. `Severity` is an
ordered `IntEnum` from `INFO` to `CRITICAL`, and `Severity.penalty()` gives the
score deduction for an issue of that severity (25, 15, 8, 3 and 0 from
`CRITICAL` down to `INFO`).

## Helpers

- `repodoctor.files`: `path_exists`, `max_directory_depth`, `walk_files` and
  `find_files_with_extension`.
- `repodoctor.nextjs_support`: `load_package_json` returns a `PackageJson`
  with `has_dep`, `has_any_dep` and `dep_version`; `read_next_config` returns
  a `NextConfig` for the first of next.config.js, .mjs or .ts;
  `parse_npm_major_version("^14.0.0")` returns `14`.

## What it does not do

The package does not detect a project's framework: the caller chooses the
`Framework` when building a `Project`. It has no command-line tool, does not
combine issues into a health score or a report, and does not apply fixes; the
`auto_fixable` flag only marks issues that could be fixed automatically.

## Running the tests

```
pip install .[test]
pytest
```