[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stochsim"
version = "1.0.0"
description = "Stochastic simulation of chemical reaction networks with an operator-based rule notation"
requires-python = ">=3.10"
keywords = ["stochastic simulation", "gillespie", "reaction network", "epidemiology", "chemistry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Chemistry",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
stochsim = "stochsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stochsim"]

[tool.pytest.ini_options]
addopts = "-ra"
