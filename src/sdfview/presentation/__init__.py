"""Command-line interfaces and other presentation layer components."""

from .cli.inspect_sdf import main as inspect_sdf_main

__all__ = ["inspect_sdf_main"]
