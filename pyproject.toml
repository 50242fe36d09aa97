[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ductfan"
version = "0.1.0"
description = "Ducted fan performance estimates using momentum disk theory and blade element momentum theory"
requires-python = ">=3.10"
dependencies = []
keywords = ["ducted fan", "rotor", "BEMT", "momentum theory", "aerodynamics", "propeller"]
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

[project.scripts]
ductfan = "ductfan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ductfan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
