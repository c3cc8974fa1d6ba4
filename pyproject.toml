[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dotlayout"
version = "0.1.3"
description = "Graph layout building blocks: a DOT parser, geometry helpers, a ranked DAG and an SVG writer"
requires-python = ">=3.10"
dependencies = []
keywords = ["visualization", "svg", "render", "dot", "graphviz", "graph"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Presentation",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dotlayout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
