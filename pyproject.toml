[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stockroom"
version = "1.0.0"
description = "Small store inventory keeper backed by SQLite, with stock-level alerts and user roles."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["inventory", "stock", "store", "sqlite", "low-stock"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Database",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pillow",
]

[project.scripts]
stockroom = "stockroom.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stockroom"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
