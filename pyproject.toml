[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wolfdata"
version = "0.1.0"
description = "Readers and geometry tools for classic first-person shooter map and graphics data"
requires-python = ">=3.10"
dependencies = []
keywords = ["maps", "gamemaps", "vswap", "minimap", "voxel", "retro"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wolfdata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
