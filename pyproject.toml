[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dbfdoc"
version = "0.1.0"
description = "Read, create and edit dBASE (.dbf) table files, with algorithmic-order file layouts"
requires-python = ">=3.10"
dependencies = []
keywords = ["dbf", "dbase", "foxpro", "table", "csv"]
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
    "Topic :: Database",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dbfdoc = "dbfdoc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dbfdoc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
