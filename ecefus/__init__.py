"""A three-player turn-based tactics game on an 8x8 board, drawn with pygame."""

__version__ = "0.1.0"
__all__ = ["__version__"]