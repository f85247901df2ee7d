"""Widgets, view ports, layouts and an event loop for cell-based terminal interfaces."""

__version__ = "0.1.0"