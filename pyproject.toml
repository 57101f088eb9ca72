[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphtrr"
version = "0.1.0"
description = "Graph representation conversions, Euler cycles and Hamilton cycles for small undirected graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "adjacency matrix", "incidence matrix", "euler cycle", "hamilton cycle"]
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
graphtrr = "graphtrr.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphtrr"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
