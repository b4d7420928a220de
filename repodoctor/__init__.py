"""Repository health diagnostics: analyzers that report structural, testing, configuration and security issues."""

__version__ = "0.1.0"