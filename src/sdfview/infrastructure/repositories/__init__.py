"""Repository implementations."""

from .sdf_repository import SDFRepository

__all__ = ["SDFRepository"]
