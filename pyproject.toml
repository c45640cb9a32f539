[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rastergfx"
version = "0.1.0"
description = "Classic 2D raster graphics algorithms rendered to an in-memory canvas and PPM images"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graphics",
    "rasterization",
    "bresenham",
    "midpoint",
    "clipping",
    "flood-fill",
    "scanline",
    "ppm",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
rastergfx = "rastergfx.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["rastergfx"]

[tool.pytest.ini_options]
addopts = "-ra"
