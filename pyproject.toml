[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lutro"
version = "0.0.1"
description = "Pieces of a small 2D game runtime: software painter, bitmap fonts, random numbers, timing, mouse state and a module registry"
requires-python = ">=3.10"
keywords = ["game", "2d", "software-rendering", "bitmap-font", "rasterizer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["lutro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
