"""Grid maze path search: DFS, BFS and A* with exploration orders."""

__version__ = "1.0.0"
