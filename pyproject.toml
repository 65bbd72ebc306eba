[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gpsssim"
version = "0.1.0"
description = "A small GPSS-style discrete-event queueing simulation with generators, queues and workers"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "queueing", "discrete-event", "gpss", "modelling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gpsssim = "gpsssim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gpsssim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
