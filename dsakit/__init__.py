"""Classic data-structure and algorithm exercises: graphs, linked lists, matrices, searching, sorting, recursion and array problems."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "graph",
    "linked_list",
    "matrix",
    "problems",
    "recursion",
    "searching",
    "sorting",
]