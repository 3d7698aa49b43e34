[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kata"
version = "0.1.0"
description = "Small tools: a Pig dice strategy simulator, a line/word/byte counter and number filters"
requires-python = ">=3.10"
dependencies = []
keywords = ["pig", "dice", "simulation", "word-count", "wc", "filter", "primes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kata-pig = "kata.pig:main"
kata-wc = "kata.wordcount:main"

[tool.hatch.build.targets.wheel]
packages = ["kata"]

[tool.pytest.ini_options]
addopts = "-ra"
