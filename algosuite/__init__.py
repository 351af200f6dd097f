"""Classic algorithms in plain Python: trees, linked lists, grids, graphs, strings and more."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "backtracking",
    "graphs",
    "grids",
    "linked_lists",
    "numbers",
    "strings",
    "trees",
]