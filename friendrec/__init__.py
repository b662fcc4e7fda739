"""Friend recommendations over an undirected social graph."""

__version__ = "1.0.0"
