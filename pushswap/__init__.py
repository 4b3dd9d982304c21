"""Sort integers with the two-stack push_swap operation set, plus small character and string helpers."""

__version__ = "0.1.0"