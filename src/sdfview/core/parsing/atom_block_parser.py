#!/usr/bin/env python3
# src/sdfview/core/parsing/atom_block_parser.py

"""
Parsing of the Molfile atom block.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..domain.elements import atomic_number_for
from ..domain.models.atom import Atom
from ..domain.models.parse_result import ParseWarning, ParseWarningKind
from .fields import parse_float, tokenize


@dataclass(frozen=True)
class AtomBlock:
    """Atoms that survived the atom block, in file order.

    index_map maps each attempted atom line's zero-based position in the
    block to the atom's index in ``atoms``, or None if the line was skipped.
    Positions past the end of a truncated block are absent.
    """

    atoms: Tuple[Atom, ...]
    index_map: Dict[int, Optional[int]]
    warnings: Tuple[ParseWarning, ...]


def parse_atom_line(
    line: str,
) -> Tuple[Optional[Atom], Optional[Tuple[ParseWarningKind, str]]]:
    """
    Parse one atom line into an unscaled Atom.

    Args:
        line: "<x> <y> <z> <symbol> ..." with any trailing fields

    Returns:
        (atom, None) on success, (None, (warning kind, message)) otherwise
    """
    tokens = tokenize(line)
    if len(tokens) < 4:
        return None, (
            ParseWarningKind.MALFORMED_ATOM_LINE,
            f"Atom line has {len(tokens)} fields, expected at least 4",
        )

    coords = [parse_float(token) for token in tokens[:3]]
    if any(value is None for value in coords):
        return None, (
            ParseWarningKind.MALFORMED_ATOM_LINE,
            f"Cannot parse atom coordinates {tokens[:3]}",
        )

    symbol = tokens[3]
    atomic_number = atomic_number_for(symbol)
    if atomic_number is None:
        return None, (
            ParseWarningKind.UNRECOGNIZED_ELEMENT,
            f"Unrecognized element {symbol!r}",
        )

    return Atom(atomic_number, (coords[0], coords[1], coords[2])), None


def parse_atom_block(lines: List[str], start: int, num_atoms: int) -> AtomBlock:
    """
    Parse up to num_atoms atom lines beginning at start.

    Lines that fail are skipped with a warning. A block cut short by the end
    of input yields the atoms read so far.

    Args:
        lines: Normalized lines
        start: Index of the first atom line
        num_atoms: Declared atom count

    Returns:
        AtomBlock with surviving atoms, position map and warnings
    """
    atoms: List[Atom] = []
    index_map: Dict[int, Optional[int]] = {}
    warnings: List[ParseWarning] = []

    for position in range(num_atoms):
        line_index = start + position
        if line_index >= len(lines):
            warnings.append(
                ParseWarning(
                    ParseWarningKind.TRUNCATED_BLOCK,
                    len(lines),
                    "",
                    f"Atom block ends after {position} of {num_atoms} lines",
                )
            )
            break

        line = lines[line_index]
        atom, problem = parse_atom_line(line)
        if atom is None:
            kind, message = problem
            warnings.append(ParseWarning(kind, line_index, line, message))
            index_map[position] = None
            continue

        index_map[position] = len(atoms)
        atoms.append(atom)

    return AtomBlock(tuple(atoms), index_map, tuple(warnings))
