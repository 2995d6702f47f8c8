[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "purgatory"
version = "0.0.0"
description = "Classic array, string, hashing, window, prefix-sum, tree and stack algorithms as plain Python functions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "two-pointers",
    "sliding-window",
    "prefix-sum",
    "binary-tree",
    "stack",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
purgatory = "purgatory.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["purgatory"]

[tool.hatch.build.targets.sdist]
include = ["purgatory", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
files = ["purgatory"]
