[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stratbot"
version = "0.1.0"
description = "Simulate geometric Brownian motion markets and back-test moving-average trading strategies"
requires-python = ">=3.10"
dependencies = []
keywords = ["trading", "backtesting", "simulation", "moving-average", "strategy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Investment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stratbot = "stratbot.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stratbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
