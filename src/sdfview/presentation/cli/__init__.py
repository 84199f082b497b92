"""Command-line interface modules."""

from .inspect_sdf import main as inspect_sdf_main

__all__ = ["inspect_sdf_main"]
