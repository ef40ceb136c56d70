"""Vim-style motions, field editing, search, scrolling and response viewing for an HTTP client."""

__version__ = "0.3.8"