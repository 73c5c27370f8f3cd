"""Falling-sand pixel simulator: the board, its renderer and the interactive command."""

__version__ = "0.1.0"
__all__ = ["__version__"]