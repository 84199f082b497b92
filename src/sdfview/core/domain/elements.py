"""Element symbols recognized by the atom block parser."""

from types import MappingProxyType
from typing import Mapping, Optional

# Extend by adding rows.
ATOMIC_NUMBERS: Mapping[str, int] = MappingProxyType(
    {
        "H": 1,
        "C": 6,
        "N": 7,
        "O": 8,
        "F": 9,
        "S": 16,
        "Cl": 17,
        "Br": 35,
        "I": 53,
    }
)

SYMBOLS: Mapping[int, str] = MappingProxyType(
    {number: symbol for symbol, number in ATOMIC_NUMBERS.items()}
)


def atomic_number_for(symbol: str) -> Optional[int]:
    """Return the atomic number for a recognized symbol, or None."""
    return ATOMIC_NUMBERS.get(symbol)


def symbol_for(atomic_number: int) -> str:
    """Return the element symbol for an atomic number, "?" if unknown."""
    return SYMBOLS.get(atomic_number, "?")
