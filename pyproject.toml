[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridquest"
version = "0.1.0"
description = "A small 2D grid game with a start menu, a movable hero and a paged inventory."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "2d", "pygame", "inventory", "rpg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridquest = "gridquest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["gridquest"]

[tool.pytest.ini_options]
addopts = "-ra"
