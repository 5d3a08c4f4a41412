"""printf-style formatting, exact float rendering, decimal-string arithmetic and text helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "digits", "floats", "output", "printf", "spec"]