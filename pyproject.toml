[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "viprecon"
version = "0.1.0"
description = "Ray geometry, Compton kinematics, cone slicing and attenuation-map helpers for PET and Compton camera work"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "pet",
    "compton camera",
    "attenuation map",
    "ray tracing",
    "g4dcm",
    "poisson process",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
viprecon = "viprecon.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["viprecon"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
