[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edstructs"
version = "1.1.0"
description = "Classic data structures and graph algorithms: AVL trees, disjoint sets, graphs, traversals and minimum spanning trees."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "avl-tree",
    "graph",
    "disjoint-sets",
    "union-find",
    "prim",
    "kruskal",
    "topological-sort",
    "data-structures",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["edstructs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
