[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "achlioptas"
version = "0.1.0"
description = "Explosive percolation simulations: random, product, sum and Bohman-Frieze edge rules on union-find graphs"
requires-python = ">=3.10"
keywords = [
    "percolation",
    "explosive percolation",
    "achlioptas process",
    "random graphs",
    "scale-free networks",
    "union-find",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "scipy",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
achlioptas-simulate = "achlioptas.simulations:main"
achlioptas-scalefree = "achlioptas.scalefree:main"
achlioptas-plot = "achlioptas.plots:main"

[tool.hatch.build.targets.wheel]
packages = ["achlioptas"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
