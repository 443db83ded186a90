[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "msh"
version = "0.1.0"
description = "Command-line parsing for a small shell: lexer, parser, variable expansion and printf-style formatting"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "lexer", "parser", "printf", "expansion"]
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
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["msh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
