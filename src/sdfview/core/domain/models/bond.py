#!/usr/bin/env python3
# src/sdfview/core/domain/models/bond.py

"""
Domain model representing a chemical bond between atoms.
"""

from dataclasses import dataclass
from enum import Enum


class BondOrder(Enum):
    """Enumeration of bond orders recognized in a Molfile bond block."""

    SINGLE = 1
    DOUBLE = 2
    TRIPLE = 3
    UNKNOWN = 0

    @classmethod
    def from_code(cls, code: int) -> "BondOrder":
        """Map a Molfile bond type code, anything unlisted is UNKNOWN."""
        if code in (1, 2, 3):
            return cls(code)
        return cls.UNKNOWN


@dataclass(frozen=True)
class Bond:
    """Represents a chemical bond between two atoms.

    Endpoints are zero-based indices into the owning molecule's atoms.
    """

    from_index: int
    to_index: int
    order: BondOrder = BondOrder.SINGLE
