[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vf2"
version = "1.0.1"
description = "VF2 algorithm for graph, subgraph and induced subgraph isomorphism."
requires-python = ">=3.10"
dependencies = []
keywords = ["vf2", "graph", "isomorphism", "subgraph", "matching"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vf2"]

[tool.hatch.build.targets.sdist]
include = ["vf2", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
