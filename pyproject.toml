[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calchistory"
version = "0.1.0"
description = "Interactive whole-number calculator that keeps, saves, loads and filters a history of results"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "history", "console", "arithmetic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
calchistory = "calchistory.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["calchistory"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
