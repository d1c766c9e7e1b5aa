[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blastgame"
version = "0.1.0"
description = "A small shooter: move the player, fire bullets left or right and knock out the enemy."
requires-python = ">=3.10"
keywords = ["game", "shooter", "arcade", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
blastgame = "blastgame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["blastgame"]

[tool.pytest.ini_options]
addopts = "-ra"
