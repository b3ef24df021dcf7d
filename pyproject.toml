[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "levelschemer"
version = "0.1.0"
description = "Draw nuclear level schemes (levels, transitions and decay thresholds) as PDF and SVG figures."
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = [
    "nuclear physics",
    "level scheme",
    "decay scheme",
    "gamma transitions",
    "plotting",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
levelschemer = "levelschemer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["levelschemer"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
