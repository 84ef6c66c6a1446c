"""Printf-style formatting with character, string, buffer and descriptor helpers."""

__version__ = "0.1.0"

__all__ = ["charclass", "conversions", "fdio", "membuf", "printf", "strings", "writers"]