[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stockdash"
version = "0.1.0"
description = "Intraday stock toolkit: fetch one-minute bars in the background and draw candlestick or line charts with a simple moving average."
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = ["stocks", "intraday", "candlestick", "sma", "charting", "matplotlib"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stockdash = "stockdash.main:main"

[tool.hatch.build.targets.wheel]
packages = ["stockdash"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
