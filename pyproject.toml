[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pushrelabel"
version = "0.1.0"
description = "Highest-label push-relabel maximum flow with minimum cut extraction"
requires-python = ">=3.10"
dependencies = []
keywords = ["max-flow", "min-cut", "push-relabel", "graph", "network-flow"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pushrelabel = "pushrelabel.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pushrelabel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
