"""Whitespace tokenizing and strict numeric field parsing for Molfile lines."""

import math
import re
from typing import List, Optional

_INTEGER = re.compile(r"[+-]?\d+")


def tokenize(line: str) -> List[str]:
    """Split on runs of whitespace, dropping empty tokens."""
    return line.split()


def parse_int(token: str) -> Optional[int]:
    """Parse a plain decimal integer, None if token is anything else."""
    if not _INTEGER.fullmatch(token):
        return None
    return int(token)


def parse_float(token: str) -> Optional[float]:
    """Parse a finite decimal float, None if token is anything else."""
    # float() also accepts digit separators, "nan" and "inf"
    if "_" in token:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value
