[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshsieve"
version = "1.1.5"
description = "Per-point mesh data storage, slice refinement and assembly, and native balanced graph partitioning."
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "atlas", "section", "PDE", "scientific-computing", "partitioning", "louvain"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["meshsieve"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
