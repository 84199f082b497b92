"""Core domain models and element data."""

from .models.atom import Atom
from .models.bond import Bond, BondOrder
from .models.molecule import Molecule
from .models.parse_result import ParseResult
from .elements import ATOMIC_NUMBERS, atomic_number_for, symbol_for

__all__ = [
    "Atom",
    "Bond",
    "BondOrder",
    "Molecule",
    "ParseResult",
    "ATOMIC_NUMBERS",
    "atomic_number_for",
    "symbol_for",
]
