"""Command-line interface module for Simple JSON Objects.

This module provides a CLI tool that reads JSON documents and prints the
materialized generic values.
"""

from .main import main

__all__ = ["main"]
