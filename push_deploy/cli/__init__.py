"""Command line interface for push-deploy"""

from .main import cli, main

__all__ = ["cli", "main"]
