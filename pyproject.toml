[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spookyrun"
version = "0.1.0"
description = "Building blocks for a side-scrolling Halloween platformer: math helpers, color blending, tile sets, texture loading and sprite animations."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["game", "platformer", "animation", "color", "sprites", "tiles"]
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
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["spookyrun"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
