[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ztdb"
version = "0.1.0"
description = "Time/value samples for fixed-width variables, with a compact binary variable-description file format"
requires-python = ">=3.10"
dependencies = []
keywords = ["time series", "waveform", "binary format", "database"]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ztdb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
