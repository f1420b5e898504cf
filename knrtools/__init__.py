"""Classic text, number, sorting and calculator utilities and small command-line filters."""

__version__ = "0.1.0"

__all__ = [
    "arena",
    "dates",
    "filecompare",
    "finder",
    "histograms",
    "keywords",
    "miniformat",
    "numparse",
    "rpn",
    "searching",
    "sorting",
    "symtab",
    "textops",
    "wordtree",
]