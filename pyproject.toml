[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plutusflat"
version = "0.1.0"
description = "Flat bit-level encoding for Untyped Plutus Core constants, binders, builtins and Plutus data"
requires-python = ">=3.10"
keywords = ["plutus", "uplc", "flat", "cbor", "cardano", "serialization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["plutusflat"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
