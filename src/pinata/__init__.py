"""Pinata - learn vocabulary from the things in your photos."""

__version__ = "0.1.0"
