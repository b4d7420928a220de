"""Core types shared by all analyzers: categories, severities and issues."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from repodoctor.project import Project


class AnalyzerCategory(enum.Enum):
    """Area of repository health that a finding belongs to."""

    STRUCTURE = "Structure"
    DEPENDENCIES = "Dependencies"
    CONFIGURATION = "Configuration"
    TESTING = "Testing"
    SECURITY = "Security"
    DOCUMENTATION = "Documentation"

    def __str__(self) -> str:
        return self.value


_PENALTIES = {
    "CRITICAL": 25,
    "HIGH": 15,
    "MEDIUM": 8,
    "LOW": 3,
    "INFO": 0,
}


class Severity(enum.IntEnum):
    """How serious a finding is; higher values are more severe."""

    INFO = 0
    LOW = 25
    MEDIUM = 50
    HIGH = 75
    CRITICAL = 100

    def penalty(self) -> int:
        """Points deducted from the health score for one such issue."""
        return _PENALTIES[self.name]

    def __str__(self) -> str:
        return self.name


@dataclass
class Issue:
    """A single finding reported by an analyzer."""

    id: str
    analyzer: str
    category: AnalyzerCategory
    severity: Severity
    title: str
    description: str
    file: Path | None = None
    line: int | None = None
    suggestion: str | None = None
    auto_fixable: bool = False
    references: list[str] = field(default_factory=list)


class Analyzer(ABC):
    """Base class for repository checks."""

    name: ClassVar[str]
    description: ClassVar[str]
    category: ClassVar[AnalyzerCategory]

    @abstractmethod
    def applies_to(self, project: Project) -> bool:
        """Whether this analyzer should run on the given project."""

    @abstractmethod
    def analyze(self, project: Project) -> list[Issue]:
        """Inspect the project and return the issues found."""