[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "silkengine"
version = "0.1.0"
description = "Building blocks of a small 2D side-scrolling game engine: collision tables, timers, levels, image processing, resources, text and UI widgets."
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "platformer", "ui", "widgets", "timer", "image-processing", "sprites"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["silkengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
