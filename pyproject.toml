[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minidb"
version = "0.1.0"
description = "Two tiny in-memory databases: a hash-table key-value shell and a paged row store with an SQL-like prompt"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "key-value", "hash table", "repl", "in-memory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minidb-kv = "minidb.kvshell:main"
minidb-sql = "minidb.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["minidb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
