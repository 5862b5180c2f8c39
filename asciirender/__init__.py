"""Render PNG images as ASCII art with edge-aware character selection."""

__version__ = "0.1.0"