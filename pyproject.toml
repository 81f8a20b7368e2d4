[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinylinalg"
version = "0.1.0"
description = "Small dense linear algebra: vectors, matrices and linear system solvers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linear algebra",
    "matrix",
    "vector",
    "gaussian elimination",
    "conjugate gradient",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tinylinalg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
