[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpp2front"
version = "0.1.1"
description = "Source line types, tokenizer and command-line flag handling for a Cpp2 front end"
requires-python = ">=3.10"
dependencies = []
keywords = ["cpp2", "lexer", "tokenizer", "compiler", "front-end"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cpp2front"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
