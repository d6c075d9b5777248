[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "missionboard"
version = "1.0.0"
description = "A small text-menu mission tracker: accept, progress, give up and complete missions for experience."
requires-python = ">=3.10"
keywords = ["game", "missions", "quests", "rpg", "terminal", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
missionboard = "missionboard.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["missionboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
