"""ASCII character, byte-buffer, string, conversion, fd-output and linked-list utilities."""

__version__ = "0.1.0"
__all__ = ["ctype", "memory", "strings", "convert", "output", "textops", "linkedlist"]