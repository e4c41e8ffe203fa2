"""
CLI Module for the Fantasy Hockey Dashboard

Prints derived dashboard views from JSON snapshot files.

Usage:
    python -m cli.main --help
"""

from cli.main import main

__all__ = ["main"]
