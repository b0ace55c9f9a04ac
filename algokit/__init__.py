"""Classic sorting, array, linked-structure and small graph algorithms."""

__version__ = "0.1.0"
__all__ = ["sorting", "arrays", "linked", "misc"]