"""Core domain models, parsing stages, interfaces and services."""

from .domain.models import (
    Atom,
    Bond,
    BondOrder,
    Molecule,
    ParseErrorKind,
    ParseResult,
    ParseWarningKind,
    SDFParseError,
)
from .parsing import BondIndexing, ParseOptions, parse_sdf, parse_sdf_records
from .services.molecule_loading_service import MoleculeLoadingService

__all__ = [
    "Atom",
    "Bond",
    "BondOrder",
    "Molecule",
    "ParseErrorKind",
    "ParseResult",
    "ParseWarningKind",
    "SDFParseError",
    "BondIndexing",
    "ParseOptions",
    "parse_sdf",
    "parse_sdf_records",
    "MoleculeLoadingService",
]
