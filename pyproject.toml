[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "recursia"
version = "1.0.0"
description = "Recursive drawing of the Flag of Recursia, with 2D geometry, colors, fonts, a styled text console, chi-squared checks and a console demo menu."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "recursion",
    "fractal",
    "graphics",
    "geometry",
    "color",
    "chi-squared",
    "console",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["recursia"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
