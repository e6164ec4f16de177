[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linalg3d"
version = "1.0.0"
description = "Points, directions and small dense matrices for 2D/3D engine math, with a colour-fading demo window"
requires-python = ">=3.10"
keywords = ["linear algebra", "vector", "matrix", "point", "geometry", "3d", "determinant"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
linalg3d-fader = "linalg3d.fader:main"

[tool.hatch.build.targets.wheel]
packages = ["linalg3d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
