"""Rubik's cube state models with face turns, solved checks and corner encoding."""

__version__ = "0.1.0"
__all__ = ["cube", "array1d", "array3d", "bitboard"]