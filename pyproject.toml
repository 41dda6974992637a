[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fruitslots"
version = "0.1.0"
description = "A five-reel fruit slot machine game with a state-machine driven spin cycle, drawn with pygame"
requires-python = ">=3.10"
keywords = ["slots", "slot machine", "game", "pygame", "state machine"]
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
fruitslots = "fruitslots.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fruitslots"]

[tool.pytest.ini_options]
addopts = "-ra"
