[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pagingsim"
version = "0.1.0"
description = "A teaching simulator for paged memory allocation and page replacement"
requires-python = ">=3.10"
dependencies = []
keywords = ["paging", "virtual memory", "page replacement", "operating systems", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pagingsim = "pagingsim.simulator:main"

[tool.hatch.build.targets.wheel]
packages = ["pagingsim"]

[tool.pytest.ini_options]
addopts = "-ra"
