[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hyperrewrite"
version = "1.0.0"
description = "Directed hypergraphs, pattern matching, canonical forms and rewriting rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["hypergraph", "rewriting", "pattern matching", "canonicalization", "graph isomorphism"]
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

[tool.hatch.build.targets.wheel]
packages = ["hyperrewrite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
