"""A linked binary tree node with insertion, traversal and shape measurements."""

__version__ = "0.1.0"
__all__ = ["node"]