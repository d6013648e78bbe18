[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nucscheme"
version = "0.1.0"
description = "Data model for nuclear decay schemes: uncertain values, nuclide ids, levels, transitions, spins and reactions"
requires-python = ">=3.10"
dependencies = []
keywords = ["nuclear physics", "decay scheme", "ENSDF", "nuclide", "gamma spectroscopy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nucscheme"]

[tool.pytest.ini_options]
addopts = "-ra"
