"""The project under inspection and the framework it was detected as."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


class Framework(enum.Enum):
    """Frameworks a repository can be recognised as."""

    SYMFONY = "Symfony"
    LARAVEL = "Laravel"
    FLUTTER = "Flutter"
    NEXTJS = "Next.js"
    RUST_CARGO = "Rust (Cargo)"
    NODEJS = "Node.js"
    PYTHON = "Python"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


@dataclass
class Project:
    """A repository on disk together with its detected framework."""

    path: Path
    framework: Framework = Framework.UNKNOWN

    def __post_init__(self) -> None:
        self.path = Path(self.path)