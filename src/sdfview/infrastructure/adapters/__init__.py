"""Adapters to external services and libraries.

The RDKit adapter is imported on demand from
``sdfview.infrastructure.adapters.rdkit_adapter``.
"""

from .pubchem_query import PubChemQuery

__all__ = ["PubChemQuery"]
