[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "irondome"
version = "0.1.0"
description = "A terminal arcade game: shoot down flying plates with an auto-aiming rocket cannon."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "terminal", "ascii", "ballistics"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
irondome = "irondome.game:main"

[tool.hatch.build.targets.wheel]
packages = ["irondome"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
