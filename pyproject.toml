[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "beginnerkit"
version = "0.1.0"
description = "Small everyday calculations: sums, areas, unit conversions and change-making"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "arithmetic", "geometry", "conversions", "banknotes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
beginnerkit = "beginnerkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["beginnerkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
