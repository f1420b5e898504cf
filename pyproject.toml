[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "knrtools"
version = "0.1.0"
description = "Classic text, number, sorting and calculator utilities: string helpers, number parsing, quicksort, an RPN calculator, word counting and small command-line filters"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "strings",
    "parsing",
    "quicksort",
    "binary-search",
    "rpn",
    "calculator",
    "grep",
    "word-count",
    "histogram",
]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
knr-strlen = "knrtools.textops:main"
knr-hex = "knrtools.numparse:main"
knr-sort = "knrtools.sorting:main"
knr-rpn = "knrtools.rpn:main"
knr-expr = "knrtools.rpn:expr_main"
knr-wordcount = "knrtools.wordtree:main"
knr-grep = "knrtools.finder:grep_main"
knr-find = "knrtools.finder:find_main"
knr-compare = "knrtools.filecompare:main"
knr-keywords = "knrtools.keywords:main"
knr-echo = "knrtools.miniformat:main"

[tool.hatch.build.targets.wheel]
packages = ["knrtools"]

[tool.hatch.build.targets.sdist]
include = ["knrtools", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
