[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nseof"
version = "0.1.0"
description = "Building blocks for a staggered-grid incompressible Navier-Stokes solver: fields, mesh spacing, parameters, XML configuration and domain decomposition"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["cfd", "navier-stokes", "finite-differences", "staggered-grid", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["nseof"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
