"""Two-stack sorting puzzle: compute the moves that sort a list of integers."""

__version__ = "0.1.0"
__all__ = ["parsing", "stacks", "sorting", "cli"]