[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oiseau"
version = "0.1.0"
description = "Reference cells, mesh topology and geometry containers, and a jagged array for nodal discontinuous Galerkin codes"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "finite element", "discontinuous galerkin", "topology", "jagged array"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
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
packages = ["oiseau"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
