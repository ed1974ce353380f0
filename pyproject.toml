[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ingotkit"
version = "0.1.0"
description = "General-purpose helpers: text extraction, math utilities, collection tools, filesystem helpers and reactive lists."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "lerp", "primes", "reactive", "collections", "filesystem"]
classifiers = [
    "Development Status :: 4 - Beta",
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
packages = ["ingotkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
