"""Recipe-tree search for Little Alchemy 2 elements: BFS, DFS and bidirectional builders, a wiki scraper and a JSON HTTP server."""

__version__ = "0.1.0"

__all__ = ["__version__"]