[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prettyterm"
version = "0.1.0"
description = "Styled terminal output: ANSI colors and styles, headers, word-wrapped paragraphs and side-by-side panels."
requires-python = ">=3.10"
keywords = ["terminal", "console", "color", "ansi", "cli", "header", "panel"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
]
dependencies = [
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["prettyterm"]

[tool.pytest.ini_options]
addopts = "-ra"
