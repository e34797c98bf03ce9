"""Command-line interface for iowalk."""

from .runner import CLIRunner

__all__ = ["CLIRunner"]
