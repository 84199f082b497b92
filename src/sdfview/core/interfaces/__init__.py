"""Abstract interfaces implemented by infrastructure components."""

from .repository import Repository
from .structure_source import StructureSource, looks_like_sdf

__all__ = ["Repository", "StructureSource", "looks_like_sdf"]
