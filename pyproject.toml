[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ciellab"
version = "0.1.0"
description = "Building blocks for Python: message formatting, scope guards, range comparison, a callable wrapper, a linked list with node reuse, and lock-guarded concurrency primitives."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "containers",
    "linked-list",
    "scope-guard",
    "treiber-stack",
    "mpsc-queue",
    "hazard-pointer",
    "spinlock",
    "reference-counting",
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
packages = ["ciellab"]

[tool.hatch.build.targets.sdist]
include = ["ciellab", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
