[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "speedwire"
version = "0.1.0"
description = "Building blocks for SMA Speedwire tools: measurement buffers, change-point estimation, byte encoding, address helpers, logging and command definitions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "speedwire",
    "sma",
    "emeter",
    "inverter",
    "photovoltaic",
    "measurement",
    "ring buffer",
    "change point",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
    "Topic :: System :: Networking :: Monitoring",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["speedwire"]

[tool.hatch.build.targets.sdist]
include = ["speedwire", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
