[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procparse"
version = "0.1.0"
description = "Parsers for Linux /proc and system statistics files"
requires-python = ">=3.10"
dependencies = []
keywords = ["linux", "proc", "procfs", "monitoring", "statistics", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["procparse"]

[tool.pytest.ini_options]
addopts = "-ra"
