#!/usr/bin/env python3
# src/sdfview/core/domain/models/atom.py

"""
Domain model representing an atom parsed from a Molfile atom block.
"""

from dataclasses import dataclass
from typing import Tuple

from ..elements import symbol_for


@dataclass(frozen=True)
class Atom:
    """Represents an atom in a molecular structure."""

    atomic_number: int
    position: Tuple[float, float, float]

    @property
    def symbol(self) -> str:
        """Element symbol of the atom."""
        return symbol_for(self.atomic_number)

    def scaled(self, factor: float) -> "Atom":
        """Return a copy of the atom with its position multiplied by factor."""
        x, y, z = self.position
        return Atom(self.atomic_number, (x * factor, y * factor, z * factor))
