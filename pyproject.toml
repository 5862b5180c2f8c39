[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asciirender"
version = "0.1.0"
description = "Render PNG images as ASCII art in the terminal, with edge-aware character selection"
requires-python = ">=3.10"
keywords = ["ascii", "ascii-art", "image", "terminal", "edge-detection", "sobel", "bilinear", "max-pooling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
asciirender = "asciirender.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["asciirender"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
