"""Bitmaps, plain and sorted lists, hash tables, debug flags and host helpers."""

__version__ = "0.1.0"
__all__ = ["bitmap", "debug", "hashtable", "libtest", "linkedlist", "sysdep"]