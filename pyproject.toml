[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gamecore"
version = "1.0.0"
description = "Game server building blocks: classic sorting algorithms, byte-string helpers, a timer wheel and a cached thread pool"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "thread pool", "timer wheel", "game server", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gamecore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
