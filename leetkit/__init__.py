"""Solutions to classic algorithm puzzles over linked lists, trees, strings, numbers, arrays, skylines and grids."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "grids",
    "linked_lists",
    "number_containers",
    "numbers",
    "skyline",
    "strings",
    "trees",
]