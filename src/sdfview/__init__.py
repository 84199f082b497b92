"""Parse MDL Molfile / SDF V2000 text into molecular graphs."""

from .core import (
    Atom,
    Bond,
    BondIndexing,
    BondOrder,
    Molecule,
    MoleculeLoadingService,
    ParseErrorKind,
    ParseOptions,
    ParseResult,
    ParseWarningKind,
    SDFParseError,
    parse_sdf,
    parse_sdf_records,
)

__version__ = "0.1.0"

__all__ = [
    "Atom",
    "Bond",
    "BondIndexing",
    "BondOrder",
    "Molecule",
    "MoleculeLoadingService",
    "ParseErrorKind",
    "ParseOptions",
    "ParseResult",
    "ParseWarningKind",
    "SDFParseError",
    "parse_sdf",
    "parse_sdf_records",
]
