"""Reading the package.json and next.config files of a Next.js project."""

from __future__ import annotations

import json
import os
import re
from dataclasses import dataclass, field
from pathlib import Path

NEXT_CONFIG_EXTENSIONS = ("js", "mjs", "ts")

_VERSION_PREFIXES = ("^", "~", ">=", "<=", ">", "<", "=")
_MAJOR_RE = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


@dataclass
class PackageJson:
    """The dependency sections of a package.json file."""

    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)

    def has_dep(self, name: str) -> bool:
        """Whether ``name`` is a runtime dependency."""
        return name in self.dependencies

    def has_any_dep(self, name: str) -> bool:
        """Whether ``name`` is a runtime or development dependency."""
        return name in self.dependencies or name in self.dev_dependencies

    def dep_version(self, name: str) -> str | None:
        """Version constraint of ``name``, runtime dependencies taking precedence."""
        if name in self.dependencies:
            return self.dependencies[name]
        return self.dev_dependencies.get(name)


def _dep_map(value: object) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {key: item if isinstance(item, str) else "" for key, item in value.items()}


def load_package_json(path: str | os.PathLike) -> PackageJson | None:
    """Parse ``package.json`` in the directory ``path``; None if unreadable or invalid."""
    try:
        content = (Path(path) / "package.json").read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, UnicodeDecodeError, ValueError):
        return None
    if not isinstance(data, dict):
        return PackageJson()
    return PackageJson(
        dependencies=_dep_map(data.get("dependencies")),
        dev_dependencies=_dep_map(data.get("devDependencies")),
    )


@dataclass(frozen=True)
class NextConfig:
    """A next.config file and its text."""

    path: Path
    content: str


def read_next_config(path: str | os.PathLike) -> NextConfig | None:
    """The first readable next.config.{js,mjs,ts} in ``path``, or None."""
    for extension in NEXT_CONFIG_EXTENSIONS:
        config_path = Path(path) / f"next.config.{extension}"
        try:
            content = config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            continue
        return NextConfig(config_path, content)
    return None


def _strip_repeated(text: str, prefix: str) -> str:
    while text.startswith(prefix):
        text = text[len(prefix):]
    return text


def parse_npm_major_version(constraint: str) -> int | None:
    """Major version number of an npm version constraint such as ``^14.0.0``."""
    cleaned = constraint.strip()
    for prefix in _VERSION_PREFIXES:
        cleaned = _strip_repeated(cleaned, prefix)
    major = cleaned.strip().split(".", 1)[0]
    if not _MAJOR_RE.fullmatch(major):
        return None
    value = int(major)
    return value if value <= _U32_MAX else None