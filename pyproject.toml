[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "embpatterns"
version = "0.1.0"
description = "Event-driven design patterns for embedded-style software: callback servers, observers, counter state machines and thread coordination."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "embedded",
    "design-patterns",
    "callback",
    "observer",
    "state-machine",
    "fsm",
    "threads",
    "mutex",
    "condition-variable",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
embpatterns-callbacks = "embpatterns.siggen:main"
embpatterns-observer = "embpatterns.observer:main"
embpatterns-counter = "embpatterns.counter_app:main"
embpatterns-threads = "embpatterns.threads:main"

[tool.hatch.build.targets.wheel]
packages = ["embpatterns"]

[tool.hatch.build.targets.sdist]
include = ["embpatterns", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
