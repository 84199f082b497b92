"""Infrastructure implementations of core interfaces and adapters."""

from .repositories.sdf_repository import SDFRepository
from .adapters.pubchem_query import PubChemQuery

__all__ = [
    "SDFRepository",
    "PubChemQuery",
]
