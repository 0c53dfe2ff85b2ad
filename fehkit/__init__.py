"""Zoom, placement, background-script and IPC-message helpers for an image viewer."""

__version__ = "0.1.0"