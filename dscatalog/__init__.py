"""Textbook data-structure operations with a browsable catalog."""

__version__ = "0.1.0"
