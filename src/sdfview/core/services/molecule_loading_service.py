"""Service that fetches structure text from a source and parses it."""

import logging
from typing import Optional

from ..domain.models.parse_result import ParseResult
from ..interfaces.structure_source import StructureSource, looks_like_sdf
from ..parsing.sdf_parser import ParseOptions, parse_sdf

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 200


class InvalidResponseError(ValueError):
    """The source returned something that is not structure file text."""


class MoleculeLoadingService:
    """
    Load molecules by identifier.

    Acquisition is delegated to a StructureSource; this service checks the
    response, runs the parser and reports the outcome through logging.
    """

    def __init__(
        self, source: StructureSource, options: Optional[ParseOptions] = None
    ):
        """Initialize service with source dependency."""
        self._source = source
        self._options = options

    def load(self, identifier: str) -> ParseResult:
        """
        Fetch and parse the structure for an identifier.

        Args:
            identifier: Name, CID or other key understood by the source

        Returns:
            ParseResult from the parser

        Raises:
            InvalidResponseError: If the source returned empty or markup text
        """
        identifier = identifier.strip()
        text = self._source.fetch_text(identifier)

        if not looks_like_sdf(text):
            preview = text.strip()[:PREVIEW_LENGTH]
            logger.error(f"Response for {identifier!r} is not SDF data: {preview!r}")
            raise InvalidResponseError(f"Response for {identifier!r} is not SDF data")

        result = parse_sdf(text, self._options)
        for warning in result.warnings:
            logger.warning(
                f"{identifier}: line {warning.line_index}: {warning.message}"
            )

        if result.ok:
            molecule = result.molecule
            logger.info(
                f"Parsed {identifier}: {molecule.num_atoms} atoms, "
                f"{molecule.num_bonds} bonds"
            )
        else:
            logger.error(f"Failed to parse {identifier}: {result.failure.message}")

        return result
