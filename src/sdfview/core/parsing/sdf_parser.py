#!/usr/bin/env python3
# src/sdfview/core/parsing/sdf_parser.py

"""
Parse a single MDL Molfile (SDF V2000 record) into a Molecule.

The stages run strictly forward over one pass of the normalized lines:
header, atom block, bond block, assembly. Each call builds a fresh Molecule
and shares no state with other calls.
"""

from dataclasses import dataclass
from typing import Optional

from ..domain.models.parse_result import (
    ParseErrorKind,
    ParseFailure,
    ParseResult,
)
from .atom_block_parser import parse_atom_block
from .bond_block_parser import BondIndexing, parse_bond_block
from .header_reader import read_header
from .line_normalizer import normalize_lines
from .molecule_builder import COORDINATE_SCALE, build_molecule


@dataclass(frozen=True)
class ParseOptions:
    """Parser settings."""

    scale: float = COORDINATE_SCALE
    bond_indexing: BondIndexing = BondIndexing.REMAP


DEFAULT_OPTIONS = ParseOptions()


def parse_sdf(text: str, options: Optional[ParseOptions] = None) -> ParseResult:
    """
    Parse Molfile text.

    Args:
        text: Raw Molfile or single SDF record text
        options: Scale and bond indexing settings, defaults if omitted

    Returns:
        ParseResult holding the Molecule and warnings, or the failure
    """
    options = options or DEFAULT_OPTIONS
    lines = normalize_lines(text)

    header = read_header(lines)
    if isinstance(header, ParseFailure):
        return ParseResult(failure=header)

    atom_block = parse_atom_block(lines, header.atom_data_start, header.num_atoms)
    if not atom_block.atoms:
        return ParseResult.failed(
            ParseErrorKind.NO_ATOMS_PARSED,
            f"None of the {header.num_atoms} declared atoms could be parsed",
            atom_block.warnings,
        )

    bond_block = parse_bond_block(
        lines,
        header.bond_data_start,
        header.num_bonds,
        atom_block,
        options.bond_indexing,
    )

    molecule = build_molecule(atom_block.atoms, bond_block.bonds, options.scale)
    return ParseResult.success(molecule, atom_block.warnings + bond_block.warnings)
