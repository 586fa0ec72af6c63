[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zephyrgebra"
version = "0.1.0"
description = "Pure-Python linear algebra toolkit: vectors, matrices, polynomials and 2D/3D transforms"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "linear algebra",
    "matrix",
    "vector",
    "polynomial",
    "eigenvalues",
    "root finding",
    "fft",
    "transformations",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zephyrgebra"]

[tool.hatch.build.targets.sdist]
include = ["zephyrgebra", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
