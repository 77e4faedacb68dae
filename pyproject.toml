[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gracli"
version = "0.1.0"
description = "Parse command lines against a command tree described in a YAML configuration file"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["cli", "command-line", "parser", "yaml", "configuration", "subcommands"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gracli = "gracli.main:main"

[tool.hatch.build.targets.wheel]
packages = ["gracli"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
