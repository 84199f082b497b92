#!/usr/bin/env python3
# src/sdfview/core/parsing/bond_block_parser.py

"""
Parsing of the Molfile bond block.

Bond lines name their atoms by 1-based position in the atom block. When atom
lines were skipped, those positions no longer line up with the surviving
atoms; BondIndexing selects how endpoints are resolved.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..domain.models.bond import Bond, BondOrder
from ..domain.models.parse_result import ParseWarning, ParseWarningKind
from .atom_block_parser import AtomBlock
from .fields import parse_int, tokenize


class BondIndexing(Enum):
    """How bond endpoints are resolved against the surviving atoms."""

    # Translate file positions through the atom block's position map
    REMAP = "remap"
    # Use file positions directly as indices into the surviving atoms
    POSITIONAL = "positional"


@dataclass(frozen=True)
class BondBlock:
    """Bonds that survived the bond block."""

    bonds: Tuple[Bond, ...]
    warnings: Tuple[ParseWarning, ...]


def _resolve(
    position: int, atom_block: AtomBlock, indexing: BondIndexing
) -> Tuple[Optional[int], Optional[ParseWarningKind]]:
    """Map a zero-based file position to an atom index."""
    if indexing is BondIndexing.POSITIONAL:
        if 0 <= position < len(atom_block.atoms):
            return position, None
        return None, ParseWarningKind.BOND_INDEX_OUT_OF_RANGE

    if position not in atom_block.index_map:
        return None, ParseWarningKind.BOND_INDEX_OUT_OF_RANGE
    index = atom_block.index_map[position]
    if index is None:
        return None, ParseWarningKind.BOND_TO_SKIPPED_ATOM
    return index, None


def parse_bond_block(
    lines: List[str],
    start: int,
    num_bonds: int,
    atom_block: AtomBlock,
    indexing: BondIndexing = BondIndexing.REMAP,
) -> BondBlock:
    """
    Parse up to num_bonds bond lines beginning at start.

    Args:
        lines: Normalized lines
        start: Index of the first bond line, fixed by the declared atom count
        num_bonds: Declared bond count
        atom_block: Result of the atom pass, used for endpoint validation
        indexing: Endpoint resolution strategy

    Returns:
        BondBlock with surviving bonds and warnings
    """
    bonds: List[Bond] = []
    warnings: List[ParseWarning] = []

    def skip(kind: ParseWarningKind, line_index: int, line: str, message: str):
        warnings.append(ParseWarning(kind, line_index, line, message))

    for i in range(num_bonds):
        line_index = start + i
        if line_index >= len(lines):
            skip(
                ParseWarningKind.TRUNCATED_BLOCK,
                len(lines),
                "",
                f"Bond block ends after {i} of {num_bonds} lines",
            )
            break

        line = lines[line_index]
        tokens = tokenize(line)
        if len(tokens) < 3:
            skip(
                ParseWarningKind.MALFORMED_BOND_LINE,
                line_index,
                line,
                f"Bond line has {len(tokens)} fields, expected at least 3",
            )
            continue

        values = [parse_int(token) for token in tokens[:3]]
        if any(value is None for value in values):
            skip(
                ParseWarningKind.MALFORMED_BOND_LINE,
                line_index,
                line,
                f"Cannot parse bond fields {tokens[:3]}",
            )
            continue

        from1, to1, order_code = values
        from_index, from_problem = _resolve(from1 - 1, atom_block, indexing)
        to_index, to_problem = _resolve(to1 - 1, atom_block, indexing)
        problem = from_problem or to_problem
        if problem is not None:
            skip(problem, line_index, line, f"Cannot place bond {from1} -> {to1}")
            continue

        bonds.append(Bond(from_index, to_index, BondOrder.from_code(order_code)))

    return BondBlock(tuple(bonds), tuple(warnings))
