[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixelsim"
version = "0.1.0"
description = "An interactive falling-sand pixel simulator with wood, fire, water, sand, stone and smoke"
requires-python = ">=3.10"
keywords = ["falling-sand", "cellular-automaton", "simulation", "pixel", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pixelsim = "pixelsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pixelsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
