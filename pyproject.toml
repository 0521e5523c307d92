[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minotaur"
version = "0.1.0"
description = "Geometry, stroke-font text, test bitmaps, image loading, JSON conversion and serial access for pen-plotter tools"
requires-python = ">=3.10"
keywords = ["plotter", "pen-plotter", "vector", "stroke-font", "pgm", "bitmap", "serial", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]
dependencies = [
    "pillow",
    "pyserial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["minotaur"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
