[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "classicalgos"
version = "0.1.0"
description = "Classic dynamic-programming, greedy, graph and string-matching algorithms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "dynamic programming",
    "greedy",
    "graphs",
    "shortest path",
    "minimum spanning tree",
    "graph colouring",
    "string matching",
    "knapsack",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
classicalgos = "classicalgos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["classicalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
