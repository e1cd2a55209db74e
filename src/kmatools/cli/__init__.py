"""
Console scripts for kmatools

Copyright © 2026 Pixelgen Technologies AB.
"""

from kmatools.cli.main import main_cli

__all__ = ["main_cli"]
