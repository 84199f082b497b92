#!/usr/bin/env python3
# src/sdfview/core/parsing/header_reader.py

"""
Reading the Molfile header and counts line.

A Molfile starts with three free-form header lines (title, program/timestamp,
comment) followed by the counts line. The comment line is very often blank
and disappears during normalization, in which case the counts line moves up
to the third non-blank line. Both positions are considered, preferring the
one carrying the V2000 version tag, then one made only of integer fields
(an atom line such as "0 0 0 C" also starts with two integers).
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..domain.models.parse_result import ParseErrorKind, ParseFailure
from .fields import parse_int, tokenize

MIN_LINES = 5
COUNTS_LINE_INDEX = 3
VERSION_TAG = "V2000"


@dataclass(frozen=True)
class CountsHeader:
    """Declared block sizes and where the atom block begins."""

    num_atoms: int
    num_bonds: int
    counts_line_index: int

    @property
    def atom_data_start(self) -> int:
        return self.counts_line_index + 1

    @property
    def bond_data_start(self) -> int:
        # Fixed by the declared atom count, not by how many atoms survived
        return self.atom_data_start + self.num_atoms


def parse_counts_line(line: str) -> Optional[Tuple[int, int]]:
    """Return (num_atoms, num_bonds) from a counts line, None if malformed."""
    tokens = tokenize(line)
    if len(tokens) < 2:
        return None
    num_atoms = parse_int(tokens[0])
    num_bonds = parse_int(tokens[1])
    if num_atoms is None or num_bonds is None or num_atoms < 0 or num_bonds < 0:
        return None
    return num_atoms, num_bonds


def read_header(lines: List[str]) -> Union[CountsHeader, ParseFailure]:
    """
    Locate and parse the counts line.

    Args:
        lines: Normalized (non-blank) lines

    Returns:
        CountsHeader on success, ParseFailure otherwise
    """
    if len(lines) < MIN_LINES:
        return ParseFailure(
            ParseErrorKind.INSUFFICIENT_LINES,
            f"Expected at least {MIN_LINES} non-blank lines, got {len(lines)}",
        )

    candidates = []
    for index in (COUNTS_LINE_INDEX, COUNTS_LINE_INDEX - 1):
        counts = parse_counts_line(lines[index])
        if counts is not None:
            candidates.append((index, counts))

    if not candidates:
        return ParseFailure(
            ParseErrorKind.MALFORMED_COUNTS_LINE,
            f"Counts line is not two integers: {lines[COUNTS_LINE_INDEX]!r}",
        )

    def rank(candidate):
        tokens = tokenize(lines[candidate[0]])
        tagged = VERSION_TAG in tokens
        numeric = all(parse_int(t) is not None for t in tokens if t != VERSION_TAG)
        return (not tagged, not numeric)

    # Stable sort, so index 3 wins when both rank the same
    index, (num_atoms, num_bonds) = sorted(candidates, key=rank)[0]
    return CountsHeader(num_atoms, num_bonds, index)
