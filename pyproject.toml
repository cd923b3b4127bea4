[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exersomes"
version = "0.1.0"
description = "Rule-based models of how exercise changes signalling molecules, immune cells and tissue adaptations in bone, blood, heart and immune organs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercise",
    "physiology",
    "exerkines",
    "cytokines",
    "cardiokines",
    "osteokines",
    "immunology",
    "bone",
    "cardiology",
    "simulation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["exersomes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
