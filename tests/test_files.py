from pathlib import Path

from repodoctor.files import (
    find_files_with_extension,
    max_directory_depth,
    path_exists,
    walk_files,
)


def test_path_exists(tmp_path):
    (tmp_path / "README.md").write_text("# hi")
    assert path_exists(tmp_path, "README.md") is True
    assert path_exists(tmp_path, "LICENSE") is False


def test_path_exists_nested(tmp_path):
    (tmp_path / "dist").mkdir()
    (tmp_path / "dist" / "credentials").write_text("x")
    assert path_exists(tmp_path, "dist/credentials") is True


def test_max_depth_empty(tmp_path):
    assert max_directory_depth(tmp_path) == 0


def test_max_depth_nested(tmp_path):
    nested = Path("a/b/c/d/e/f/g/h/i/j")
    (tmp_path / nested).mkdir(parents=True)
    (tmp_path / "x").mkdir()
    assert max_directory_depth(tmp_path) == len(nested.parts)


def test_find_files_with_extension(tmp_path):
    (tmp_path / "src" / "sub").mkdir(parents=True)
    (tmp_path / "src" / "main.rs").write_text("fn main() {}")
    (tmp_path / "src" / "sub" / "lib.rs").write_text("")
    (tmp_path / "src" / "notes.txt").write_text("")
    found = find_files_with_extension(tmp_path, "rs")
    assert sorted(p.name for p in found) == ["lib.rs", "main.rs"]
    assert all(p.suffix == ".rs" for p in found)


def test_walk_files_skips_dirs(tmp_path):
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "dep.js").write_text("")
    (tmp_path / "app").mkdir()
    (tmp_path / "app" / "page.tsx").write_text("")
    names = [p.name for p in walk_files(tmp_path, ["node_modules"])]
    assert names == ["page.tsx"]


def test_walk_files_without_skip(tmp_path):
    (tmp_path / "node_modules").mkdir()
    (tmp_path / "node_modules" / "dep.js").write_text("")
    (tmp_path / "top.js").write_text("")
    names = sorted(p.name for p in walk_files(tmp_path))
    assert names == ["dep.js", "top.js"]