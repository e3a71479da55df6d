[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecefus"
version = "0.1.0"
description = "A small hot-seat, turn-based tactics game for three players on an 8x8 board"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "turn-based", "tactics", "pygame", "hot-seat"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ecefus = "ecefus.app:main"

[tool.hatch.build.targets.wheel]
packages = ["ecefus"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
