from pathlib import Path

import pytest

from repodoctor import testing
from repodoctor.project import Framework, Project
from repodoctor.traits import AnalyzerCategory, Severity


def make_project(tmp_path: Path, framework: Framework) -> Project:
    return Project(path=tmp_path, framework=framework)


def ids(issues):
    return [issue.id for issue in issues]


def test_applies_to_all(tmp_path):
    project = make_project(tmp_path, Framework.UNKNOWN)
    assert testing.TestingAnalyzer().applies_to(project) is True


def test_no_test_dir(tmp_path):
    project = make_project(tmp_path, Framework.RUST_CARGO)
    issues = testing.TestingAnalyzer().analyze(project)
    assert "TST-001" in ids(issues)


def test_no_test_dir_issue_details(tmp_path):
    project = make_project(tmp_path, Framework.RUST_CARGO)
    issue = next(i for i in testing.TestingAnalyzer().analyze(project) if i.id == "TST-001")
    assert issue.description == "Expected one of: tests"
    assert issue.suggestion == "Create a tests directory with test files"
    assert issue.severity == Severity.HIGH
    assert issue.category == AnalyzerCategory.TESTING
    assert issue.analyzer == "testing"


def test_has_test_dir(tmp_path):
    (tmp_path / "tests").mkdir()
    project = make_project(tmp_path, Framework.RUST_CARGO)
    issues = testing.TestingAnalyzer().analyze(project)
    assert "TST-001" not in ids(issues)


def test_node_missing_test_config(tmp_path):
    project = make_project(tmp_path, Framework.NODEJS)
    issues = testing.TestingAnalyzer().analyze(project)
    assert "TST-002" in ids(issues)


def test_node_has_jest_config(tmp_path):
    (tmp_path / "jest.config.js").write_text("module.exports = {}")
    project = make_project(tmp_path, Framework.NODEJS)
    issues = testing.TestingAnalyzer().analyze(project)
    assert "TST-002" not in ids(issues)


def test_rust_no_test_config_check(tmp_path):
    project = make_project(tmp_path, Framework.RUST_CARGO)
    issues = testing.TestingAnalyzer().analyze(project)
    assert "TST-002" not in ids(issues)


def test_empty_test_dir(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.rs").write_text("fn main() {}")
    (tmp_path / "tests").mkdir()
    project = make_project(tmp_path, Framework.RUST_CARGO)
    issues = testing.TestingAnalyzer().analyze(project)
    tst003 = [i for i in issues if i.id == "TST-003"]
    assert len(tst003) == 1
    assert tst003[0].description == "Found 1 source files but 0 test files."


def test_low_test_ratio(tmp_path):
    (tmp_path / "src").mkdir()
    for i in range(10):
        (tmp_path / "src" / f"mod{i}.rs").write_text("// src")
    (tmp_path / "tests").mkdir()
    (tmp_path / "tests" / "test1.rs").write_text("// test")
    project = make_project(tmp_path, Framework.RUST_CARGO)
    issues = testing.TestingAnalyzer().analyze(project)
    tst004 = [i for i in issues if i.id == "TST-004"]
    assert len(tst004) == 1
    assert tst004[0].description == (
        "Found 1 test files for 10 source files (ratio: 10%). Consider adding more tests."
    )


def test_good_test_ratio(tmp_path):
    (tmp_path / "src").mkdir()
    for i in range(3):
        (tmp_path / "src" / f"mod{i}.rs").write_text("// src")
    (tmp_path / "tests").mkdir()
    for i in range(3):
        (tmp_path / "tests" / f"test{i}.rs").write_text("// test")
    project = make_project(tmp_path, Framework.RUST_CARGO)
    issues = testing.TestingAnalyzer().analyze(project)
    assert "TST-004" not in ids(issues)
    assert "TST-003" not in ids(issues)


def test_flutter_test_dir(tmp_path):
    (tmp_path / "test").mkdir()
    project = make_project(tmp_path, Framework.FLUTTER)
    issues = testing.TestingAnalyzer().analyze(project)
    assert "TST-001" not in ids(issues)


def test_no_source_files_no_ratio_issue(tmp_path):
    (tmp_path / "tests").mkdir()
    project = make_project(tmp_path, Framework.RUST_CARGO)
    issues = testing.TestingAnalyzer().analyze(project)
    assert ids(issues) == []


@pytest.mark.parametrize(
    "framework, expected",
    [
        (Framework.SYMFONY, ("tests",)),
        (Framework.FLUTTER, ("test",)),
        (Framework.NODEJS, ("__tests__", "tests", "test", "spec")),
        (Framework.PYTHON, ("tests", "test")),
        (Framework.UNKNOWN, ("tests", "test", "__tests__", "spec")),
    ],
)
def test_test_dirs_per_framework(framework, expected):
    assert testing.test_dirs(framework) == expected


@pytest.mark.parametrize(
    "framework, expected",
    [
        (Framework.LARAVEL, ("phpunit.xml", "phpunit.xml.dist")),
        (Framework.RUST_CARGO, ()),
        (Framework.UNKNOWN, ()),
        (Framework.PYTHON, ("pytest.ini", "pyproject.toml", "setup.cfg", "tox.ini")),
    ],
)
def test_test_configs_per_framework(framework, expected):
    assert testing.test_configs(framework) == expected


def test_count_test_files_across_dirs(tmp_path):
    for directory in ("__tests__", "spec"):
        (tmp_path / directory).mkdir()
        (tmp_path / directory / "x.test.js").write_text("")
    (tmp_path / "spec" / "notes.md").write_text("")
    assert testing.count_test_files(tmp_path, Framework.NODEJS) == 2
    assert testing.count_test_files(tmp_path, Framework.RUST_CARGO) == 0