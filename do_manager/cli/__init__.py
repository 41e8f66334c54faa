"""
Command-line interface components.

This package contains the argument parser and entry point for do-manager.
"""

from .main import main, run

__all__ = ["main", "run"]
