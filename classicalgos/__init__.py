"""Classic dynamic-programming, greedy, graph and string-matching algorithms, with a demonstration command."""

__version__ = "0.1.0"
__all__ = ["cli", "dynamic", "graphs", "greedy", "matching"]