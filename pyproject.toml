[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "innex"
version = "0.1.0"
description = "Cursor-based text traversal, character token streams and small geometry helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["text", "tokenizer", "cursor", "binary-search", "matrix"]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
innex-greet = "innex.greeter:main"

[tool.hatch.build.targets.wheel]
packages = ["innex"]

[tool.hatch.build.targets.sdist]
include = ["innex", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
