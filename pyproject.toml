[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rfthermo"
version = "0.1.0"
description = "Thermophysical property models: tabulated and NSRDS functions, polynomial thermo and transport, and equations of state including Soave-Redlich-Kwong"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "thermodynamics",
    "equation of state",
    "soave-redlich-kwong",
    "thermophysical properties",
    "real fluid",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rfthermo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
