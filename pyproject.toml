[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "repodoctor"
version = "0.1.0"
description = "Diagnose repository health: structure, testing, configuration and security checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["repository", "health", "lint", "quality", "nextjs", "cargo", "analysis"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["repodoctor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
