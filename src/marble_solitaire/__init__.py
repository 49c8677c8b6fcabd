"""Marble Solitaire — peg-solitaire puzzle with a PyQt6 front end."""

__version__ = "0.1.0"
