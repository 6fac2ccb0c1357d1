[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numples"
version = "1.0.1"
description = "Yet another sudoku playing game."
requires-python = ">=3.10"
keywords = ["sudoku", "puzzle", "game", "pygame"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
numples = "numples.app:main"

[tool.hatch.build.targets.wheel]
packages = ["numples"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
