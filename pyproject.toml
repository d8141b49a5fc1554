[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyeye"
version = "0.1.0"
description = "Air combat brevity models and natural-language composition for a GCI controller in flight simulation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "gci",
    "brevity",
    "flight-simulation",
    "air-combat",
    "bearings",
    "text-to-speech",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skyeye"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
