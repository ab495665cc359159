"""Solutions to classic algorithm exercises: trees, lists, graphs, heaps, strings and DP."""

__version__ = "0.1.0"