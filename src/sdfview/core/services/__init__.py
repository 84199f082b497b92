"""Application services."""

from .molecule_loading_service import InvalidResponseError, MoleculeLoadingService

__all__ = ["InvalidResponseError", "MoleculeLoadingService"]
