[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wither"
version = "0.1.0"
description = "Game-server building blocks: vectors, block positions, bounding boxes, text components and world coordinates"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "server", "vector", "text-component", "chunk", "coordinates"]
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
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wither"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
