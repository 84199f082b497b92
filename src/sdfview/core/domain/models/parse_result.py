#!/usr/bin/env python3
# src/sdfview/core/domain/models/parse_result.py

"""
Domain model for the outcome of parsing Molfile text.

A parse either yields a molecule (possibly with warnings about skipped
records) or a single fatal failure. Bad input is reported as data, never
raised, so callers decide whether a partial molecule is good enough.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .molecule import Molecule


class ParseErrorKind(Enum):
    """Fatal reasons a parse can stop."""

    INSUFFICIENT_LINES = "insufficient_lines"
    MALFORMED_COUNTS_LINE = "malformed_counts_line"
    NO_ATOMS_PARSED = "no_atoms_parsed"


class ParseWarningKind(Enum):
    """Non-fatal per-line issues; the offending record is skipped."""

    MALFORMED_ATOM_LINE = "malformed_atom_line"
    UNRECOGNIZED_ELEMENT = "unrecognized_element"
    MALFORMED_BOND_LINE = "malformed_bond_line"
    BOND_INDEX_OUT_OF_RANGE = "bond_index_out_of_range"
    BOND_TO_SKIPPED_ATOM = "bond_to_skipped_atom"
    TRUNCATED_BLOCK = "truncated_block"


@dataclass(frozen=True)
class ParseWarning:
    """A skipped record. line_index counts non-blank lines from zero."""

    kind: ParseWarningKind
    line_index: int
    line: str
    message: str


@dataclass(frozen=True)
class ParseFailure:
    """The reason a parse was abandoned."""

    kind: ParseErrorKind
    message: str


class SDFParseError(ValueError):
    """Raised by ParseResult.unwrap when the parse failed."""

    def __init__(self, failure: ParseFailure):
        super().__init__(f"{failure.kind.value}: {failure.message}")
        self.failure = failure


@dataclass(frozen=True)
class ParseResult:
    """Either a molecule or a failure, plus the warnings collected on the way."""

    molecule: Optional[Molecule] = None
    failure: Optional[ParseFailure] = None
    warnings: Tuple[ParseWarning, ...] = ()

    def __post_init__(self):
        if (self.molecule is None) == (self.failure is None):
            raise ValueError("ParseResult needs exactly one of molecule or failure")

    @classmethod
    def success(cls, molecule: Molecule, warnings=()) -> "ParseResult":
        return cls(molecule=molecule, warnings=tuple(warnings))

    @classmethod
    def failed(
        cls, kind: ParseErrorKind, message: str, warnings=()
    ) -> "ParseResult":
        return cls(failure=ParseFailure(kind, message), warnings=tuple(warnings))

    @property
    def ok(self) -> bool:
        return self.molecule is not None

    def unwrap(self) -> Molecule:
        """
        Return the molecule or raise.

        Returns:
            The parsed Molecule

        Raises:
            SDFParseError: If the parse failed
        """
        if self.failure is not None:
            raise SDFParseError(self.failure)
        return self.molecule
