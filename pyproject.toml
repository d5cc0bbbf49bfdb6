[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubkit"
version = "0.1.0"
description = "Scene file checks, XPM texture reading and pixel helpers for a raycasting game"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycaster", "cub", "xpm", "map", "parser", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubkit = "cubkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cubkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
