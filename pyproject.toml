[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mathprog"
version = "0.1.0"
description = "Classic mathematical programming algorithms: edit distance, matrix-chain ordering, combinatorial generators and graph traversal"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "levenshtein",
    "edit-distance",
    "matrix-chain",
    "dynamic-programming",
    "permutations",
    "subsets",
    "combinatorics",
    "graph",
    "bfs",
    "dfs",
    "fibonacci",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mathprog = "mathprog.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mathprog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
