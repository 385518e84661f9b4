[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ppmlife"
version = "0.1.0"
description = "Plain-text PPM (P3) image tools: reading and writing, hidden-bit extraction, and a colour Game of Life"
requires-python = ">=3.10"
dependencies = []
keywords = ["ppm", "netpbm", "image", "steganography", "game-of-life", "cellular-automaton"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ppm-cat = "ppmlife.imagecat:main"
ppm-steganography = "ppmlife.steganography:main"
ppm-life = "ppmlife.gameoflife:main"

[tool.hatch.build.targets.wheel]
packages = ["ppmlife"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
