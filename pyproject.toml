[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "seismproc"
version = "0.1.0"
description = "Data model and file formats for downhole microseismic projects: events, wells, receivers, horizons and wave picks"
requires-python = ">=3.10"
dependencies = []
keywords = ["seismic", "microseismic", "geophysics", "wave picks", "horizons", "wells"]
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
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["seismproc"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
