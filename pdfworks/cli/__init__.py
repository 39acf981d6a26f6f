"""Command-line entry point for pdfworks."""

from .main import cli

__all__ = ["cli"]
