"""Two-stack integer sorting with a small fixed operation set, a checker, and supporting string and I/O helpers."""

__version__ = "1.0.0"
__all__ = [
    "charclass",
    "checker",
    "convert",
    "linereader",
    "linkedlist",
    "output",
    "printf",
    "sorting",
    "stacks",
    "strings",
    "validation",
]