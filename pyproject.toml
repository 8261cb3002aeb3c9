[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "levelpipe"
version = "1.0.0"
description = "Building blocks for data processing applications: JSON application context, directory layout, regex pattern matching, base64 encoding, SQLite record sets and file output."
requires-python = ">=3.10"
dependencies = []
keywords = ["pipeline", "configuration", "base64", "sqlite", "pattern-matching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["levelpipe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
