[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skippity"
version = "1.0.0"
description = "The Skippity board game for the terminal, against a friend or the computer"
requires-python = ">=3.10"
dependencies = []
keywords = ["skippity", "board game", "terminal", "game"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
skippity = "skippity.game:main"

[tool.hatch.build.targets.wheel]
packages = ["skippity"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
