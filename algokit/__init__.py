"""Classic algorithms: number theory, searching, sorting, selection, greedy, graphs, dynamic programming and backtracking."""

__version__ = "0.1.0"

__all__ = [
    "backtracking",
    "dynamic",
    "graphs",
    "greedy",
    "numbers",
    "searching",
    "selection",
    "sorting",
]