[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kiwicommon"
version = "0.1.0"
description = "Shared building blocks for property services: New Zealand address parsing, geo helpers, polylines, PostgreSQL arrays and placeholders, and small HTTP and Lambda response utilities."
requires-python = ">=3.10"
keywords = ["address parsing", "geo", "polyline", "postgres", "placeholders", "lambda", "wsgi"]
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
    "Topic :: Software Development :: Libraries",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["kiwicommon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
