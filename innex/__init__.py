"""Cursor-based text traversal, character token streams and small geometry helpers."""

__version__ = "0.1.0"