"""Solver for placing three pieces on an 8x8 block puzzle board, with a command line entry point."""

__version__ = "0.1.0"

__all__ = ["__version__"]