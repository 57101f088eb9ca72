"""Graph representation conversions, Euler cycles and Hamilton cycles for undirected graphs."""

__version__ = "0.1.0"
__all__ = ["representation", "euler", "hamilton", "cli"]