[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "storuntime"
version = "0.1.0"
description = "Runtime support for smart type optimisation: overflow-checked int64 arithmetic, big decimals, small-string storage, literal type inference and typed containers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "runtime",
    "overflow",
    "int64",
    "bigdecimal",
    "arbitrary precision",
    "small string optimization",
    "type inference",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["storuntime"]

[tool.hatch.build.targets.sdist]
include = ["storuntime", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
