[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "physengine"
version = "0.1.0"
description = "A small 2D rigid-body physics sandbox with sphere and box bodies, force generators and contact resolution"
requires-python = ">=3.10"
keywords = ["physics", "simulation", "collision", "2d", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
physengine = "physengine.app:main"

[tool.hatch.build.targets.wheel]
packages = ["physengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
