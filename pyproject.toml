[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sglib"
version = "0.1.0"
description = "Small toolkit of in-place sorting algorithms, test-data generators, a scoped performance timer and a shared logger"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "quicksort", "mergesort", "insertion-sort", "timer", "logging"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sglib"]

[tool.pytest.ini_options]
addopts = "-ra"
