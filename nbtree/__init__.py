"""Array-backed non-binary tree with traversals, search and a text menu."""

__version__ = "0.1.0"
__all__ = ["cli", "tree"]