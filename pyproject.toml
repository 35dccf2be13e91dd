[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "riyalex"
version = "0.1.0"
description = "Lexer, token dump command and core library helpers for the Riya language"
requires-python = ">=3.10"
dependencies = []
keywords = ["lexer", "tokenizer", "compiler", "riya", "language"]
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
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
riyac = "riyalex.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["riyalex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
