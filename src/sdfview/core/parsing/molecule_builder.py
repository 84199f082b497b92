"""Final assembly of parsed atoms and bonds into a Molecule."""

from typing import Sequence

from ..domain.models.atom import Atom
from ..domain.models.bond import Bond
from ..domain.models.molecule import Molecule

# Display scale applied to every parsed coordinate.
COORDINATE_SCALE = 2.0


def build_molecule(
    atoms: Sequence[Atom], bonds: Sequence[Bond], scale: float = COORDINATE_SCALE
) -> Molecule:
    """Scale atom positions and freeze atoms and bonds into a new Molecule."""
    return Molecule(tuple(atom.scaled(scale) for atom in atoms), tuple(bonds))
