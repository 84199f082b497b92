"""Molfile / SDF V2000 parsing stages."""

from .bond_block_parser import BondIndexing
from .line_normalizer import normalize_lines
from .molecule_builder import COORDINATE_SCALE, build_molecule
from .records import parse_sdf_records, split_records
from .sdf_parser import DEFAULT_OPTIONS, ParseOptions, parse_sdf

__all__ = [
    "BondIndexing",
    "COORDINATE_SCALE",
    "DEFAULT_OPTIONS",
    "ParseOptions",
    "build_molecule",
    "normalize_lines",
    "parse_sdf",
    "parse_sdf_records",
    "split_records",
]
