"""Helpers for characters, byte buffers, fd output, strings, numbers, word splitting and linked lists."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "output", "strings", "numbers", "split", "linkedlist"]