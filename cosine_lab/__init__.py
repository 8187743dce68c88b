"""Cosine Lab: an interactive cosine similarity calculator."""

__version__ = "0.1.0"
