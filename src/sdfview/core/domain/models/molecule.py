#!/usr/bin/env python3
# src/sdfview/core/domain/models/molecule.py

"""
Domain model representing a parsed molecule as atoms and bonds.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Tuple

import networkx as nx
import numpy as np

from .atom import Atom
from .bond import Bond


@dataclass(frozen=True)
class Molecule:
    """Graph representation of a molecular structure.

    Atom order is parse order and is what bond indices refer to.
    """

    atoms: Tuple[Atom, ...]
    bonds: Tuple[Bond, ...]

    def __post_init__(self):
        """Reject bonds that point outside the atom sequence."""
        n_atoms = len(self.atoms)
        for bond in self.bonds:
            if not (0 <= bond.from_index < n_atoms and 0 <= bond.to_index < n_atoms):
                raise ValueError(
                    f"Bond {bond.from_index}->{bond.to_index} references a "
                    f"missing atom (molecule has {n_atoms} atoms)"
                )

    @property
    def num_atoms(self) -> int:
        return len(self.atoms)

    @property
    def num_bonds(self) -> int:
        return len(self.bonds)

    def get_coordinates(self) -> np.ndarray:
        """Get coordinates of all atoms in the molecule.

        Returns:
            numpy array of shape (n_atoms, 3) containing xyz coordinates
        """
        return np.array([atom.position for atom in self.atoms], dtype=float).reshape(
            -1, 3
        )

    def bond_endpoints(
        self, bond: Bond
    ) -> Tuple[Tuple[float, float, float], Tuple[float, float, float]]:
        """Return the positions of the two atoms joined by a bond."""
        return self.atoms[bond.from_index].position, self.atoms[bond.to_index].position

    def to_networkx(self) -> nx.Graph:
        """Create a NetworkX graph with one node per atom and one edge per bond."""
        G = nx.Graph()
        for index, atom in enumerate(self.atoms):
            G.add_node(
                index,
                atomic_number=atom.atomic_number,
                element=atom.symbol,
                position=atom.position,
            )
        for bond in self.bonds:
            G.add_edge(bond.from_index, bond.to_index, order=bond.order)
        return G

    def formula(self) -> str:
        """Molecular formula in Hill order (C, H, then alphabetical)."""
        counts = Counter(atom.symbol for atom in self.atoms)
        if "C" in counts:
            order = ["C", "H"] + sorted(s for s in counts if s not in ("C", "H"))
        else:
            order = sorted(counts)
        return "".join(
            f"{symbol}{counts[symbol] if counts[symbol] > 1 else ''}"
            for symbol in order
            if symbol in counts
        )
