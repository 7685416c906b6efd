[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "redshift-weaponizer"
version = "1.0.0"
description = "Interactive weapon builder that assembles tabletop RPG weapons from parts and prints a stat block."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "tabletop", "game-master", "weapons", "generator"]
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
redshift-weaponizer = "redshift_weaponizer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["redshift_weaponizer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
