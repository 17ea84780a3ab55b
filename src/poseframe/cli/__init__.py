"""Command-line interface for building frames."""

from .main import main

__all__ = ["main"]
