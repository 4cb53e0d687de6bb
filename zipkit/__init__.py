"""Zip entry headers, byte-order and UTF-16 helpers, and small utilities."""

__version__ = "0.1.0"