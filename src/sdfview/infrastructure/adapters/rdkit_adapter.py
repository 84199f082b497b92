"""Adapter converting parsed molecules to RDKit molecules."""

import logging

from rdkit import Chem
from rdkit.Geometry import Point3D

from ...core.domain.models.bond import BondOrder
from ...core.domain.models.molecule import Molecule

logger = logging.getLogger(__name__)

BOND_TYPES = {
    BondOrder.SINGLE: Chem.BondType.SINGLE,
    BondOrder.DOUBLE: Chem.BondType.DOUBLE,
    BondOrder.TRIPLE: Chem.BondType.TRIPLE,
    BondOrder.UNKNOWN: Chem.BondType.UNSPECIFIED,
}


def to_rdkit_mol(molecule: Molecule, scale: float = 1.0) -> Chem.Mol:
    """
    Convert a Molecule to an unsanitized RDKit Mol with one 3D conformer.

    Args:
        molecule: Parsed molecule
        scale: Factor the positions were scaled by; divided out so the
            conformer is in file units (pass COORDINATE_SCALE for that)

    Returns:
        RDKit Mol
    """
    rw_mol = Chem.RWMol()
    for atom in molecule.atoms:
        rw_mol.AddAtom(Chem.Atom(atom.atomic_number))

    for bond in molecule.bonds:
        if bond.from_index == bond.to_index:
            logger.warning(f"Skipping self bond on atom {bond.from_index}")
            continue
        if rw_mol.GetBondBetweenAtoms(bond.from_index, bond.to_index) is not None:
            logger.warning(
                f"Skipping duplicate bond {bond.from_index}-{bond.to_index}"
            )
            continue
        rw_mol.AddBond(bond.from_index, bond.to_index, BOND_TYPES[bond.order])

    conformer = Chem.Conformer(molecule.num_atoms)
    for index, atom in enumerate(molecule.atoms):
        x, y, z = (value / scale for value in atom.position)
        conformer.SetAtomPosition(index, Point3D(x, y, z))
    conformer.Set3D(True)

    mol = rw_mol.GetMol()
    mol.AddConformer(conformer, assignId=True)
    mol.UpdatePropertyCache(strict=False)
    return mol
