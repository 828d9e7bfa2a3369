"""
Command-line interface for pg-converge.
"""

from .cli import main

__all__ = ["main"]
