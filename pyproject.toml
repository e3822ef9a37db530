[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lightgame"
version = "0.8.1"
description = "Building blocks for small 2D games: colors, rectangles, text description, frame timing and keyboard and mouse input state."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "2D", "color", "rect", "input", "timing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lightgame"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
