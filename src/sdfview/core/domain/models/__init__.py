"""Domain model classes."""

from .atom import Atom
from .bond import Bond, BondOrder
from .molecule import Molecule
from .parse_result import (
    ParseErrorKind,
    ParseFailure,
    ParseResult,
    ParseWarning,
    ParseWarningKind,
    SDFParseError,
)

__all__ = [
    "Atom",
    "Bond",
    "BondOrder",
    "Molecule",
    "ParseErrorKind",
    "ParseFailure",
    "ParseResult",
    "ParseWarning",
    "ParseWarningKind",
    "SDFParseError",
]
