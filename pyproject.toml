[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minilisp"
version = "0.1.0"
description = "Front end of a compiler for a small subset of Common Lisp: lexer, symbol table and syntax tree nodes"
requires-python = ">=3.10"
keywords = ["lisp", "common-lisp", "compiler", "lexer", "tokenizer"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minilisp = "minilisp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minilisp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
