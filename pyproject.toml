[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algopuzzles"
version = "0.1.0"
description = "Solvers for classic algorithmic interview puzzles: search, dynamic programming, grids, graphs and small puzzles."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "puzzles",
    "dynamic-programming",
    "graphs",
    "binary-search",
    "bfs",
    "interview",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algopuzzles = "algopuzzles.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algopuzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
