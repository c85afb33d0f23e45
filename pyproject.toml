[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rigidsim"
version = "0.1.0"
description = "A small particle and rigid-body physics toolkit: vectors, quaternions, matrices, meshes, colliders and components"
requires-python = ">=3.10"
dependencies = []
keywords = ["physics", "rigid body", "particle", "quaternion", "simulation", "inertia tensor"]
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
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rigidsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
