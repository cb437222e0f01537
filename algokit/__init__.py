"""Classic algorithms: sorting, searching, greedy, dynamic programming, trees, graph search and geometry."""

__version__ = "0.1.0"