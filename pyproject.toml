[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pulsefilters"
version = "0.1.0"
description = "Streaming signal-processing building blocks for pulse sensors: IIR filters, biquads, pole/zero transforms, zero-crossing detection and log readers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "signal processing",
    "iir",
    "biquad",
    "bilinear transform",
    "zero crossing",
    "heart rate",
    "pulse",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pulsefilters"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
