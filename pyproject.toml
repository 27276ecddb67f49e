[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecosim"
version = "0.1.0"
description = "Interactive grid ecosystem simulation with climate-driven vegetation growth"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["simulation", "cellular-automaton", "ecosystem", "vegetation", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ecosim = "ecosim.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["ecosim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
