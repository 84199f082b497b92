"""Turn raw Molfile text into the sequence of lines the block parsers index."""

import re
from typing import List

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """Split on \\n, \\r or \\r\\n, keeping every line."""
    return _LINE_BREAK.split(text)


def normalize_lines(text: str) -> List[str]:
    """
    Split text into non-blank, right-trimmed lines.

    Whitespace-only lines are dropped, so positions in the returned list are
    counted over non-blank lines only. Leading whitespace is kept.

    Args:
        text: Raw file text using any mix of line break styles

    Returns:
        List of lines, possibly empty
    """
    return [line.rstrip() for line in split_lines(text) if line.strip()]
