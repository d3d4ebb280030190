[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jscompiler"
version = "0.1.0"
description = "Compile a small typed JavaScript subset into a Rust program"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "javascript", "typescript", "rust", "code generation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jscompiler = "jscompiler.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jscompiler"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
