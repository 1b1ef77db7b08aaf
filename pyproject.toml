[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rockprobe"
version = "0.1.0"
description = "Load mineral rocks into space probes by exhaustive weight-bounded value search"
requires-python = ">=3.10"
dependencies = []
keywords = ["knapsack", "combinations", "optimization", "probe", "rocks"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rockprobe = "rockprobe.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rockprobe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
