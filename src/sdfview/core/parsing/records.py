"""Multi-record SD files: records separated by "$$$$" lines."""

from typing import List, Optional

from ..domain.models.parse_result import ParseResult
from .line_normalizer import split_lines
from .sdf_parser import ParseOptions, parse_sdf

RECORD_DELIMITER = "$$$$"


def split_records(text: str) -> List[str]:
    """
    Split SD file text into the text of each record.

    Records with no non-blank content, such as the tail after the final
    delimiter, are dropped.
    """
    records = []
    current: List[str] = []
    for line in split_lines(text):
        if line.strip() == RECORD_DELIMITER:
            records.append("\n".join(current))
            current = []
        else:
            current.append(line)
    records.append("\n".join(current))
    return [record for record in records if record.strip()]


def parse_sdf_records(
    text: str, options: Optional[ParseOptions] = None
) -> List[ParseResult]:
    """Parse every record in an SD file independently."""
    return [parse_sdf(record, options) for record in split_records(text)]
