[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rxpaint"
version = "0.5.2"
description = "Building blocks of a minimalist pixel editor: colors, geometry, shapes, sprites, PNG images, command history and parsing"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["pixel", "editor", "pixel-art", "png", "graphics", "sprites"]
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
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["rxpaint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
