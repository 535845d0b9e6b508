[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adcdisplay"
version = "0.1.0"
description = "Model of an ADC-fed ring buffer driving a multiplexed four-digit decimal display, with a small assertion bench"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "adc", "display", "ring buffer", "multiplexing", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adcdisplay = "adcdisplay.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adcdisplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
