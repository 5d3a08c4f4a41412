[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libfmt"
version = "0.1.0"
description = "printf-style formatting with exact decimal float rendering, plus character and integer helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "sprintf", "format", "itoa", "atoi", "decimal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["libfmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
