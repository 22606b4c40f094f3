"""ospreylint presentation layer: command line entry point."""

from ospreylint.presentation.cli import main

__all__ = ["main"]
