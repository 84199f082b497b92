# src/sdfview/infrastructure/repositories/sdf_repository.py
"""Repository implementation for a directory of SDF / Molfile files."""

import logging
import os
from typing import Dict, List, Optional

from ...core.domain.models.molecule import Molecule
from ...core.domain.models.parse_result import ParseResult
from ...core.interfaces.repository import Repository
from ...core.interfaces.structure_source import StructureSource
from ...core.parsing.records import parse_sdf_records
from ...core.parsing.sdf_parser import ParseOptions

logger = logging.getLogger(__name__)

EXTENSIONS = (".sdf", ".mol")


class SDFRepository(Repository[Molecule], StructureSource):
    """Repository for molecules stored as SDF files, one id per file."""

    def __init__(self, data_dir: str, options: Optional[ParseOptions] = None):
        """
        Initialize repository with data directory.

        Args:
            data_dir: Directory containing .sdf or .mol files
            options: Parser settings used for every file
        """
        self._data_dir = data_dir
        self._options = options
        self._cache: Dict[str, List[ParseResult]] = {}

    def _find_file(self, id: str) -> Optional[str]:
        """Path of the file named id with any-case .sdf/.mol extension."""
        matches = []
        for file_name in os.listdir(self._data_dir):
            stem, extension = os.path.splitext(file_name)
            if stem == id and extension.lower() in EXTENSIONS:
                matches.append((EXTENSIONS.index(extension.lower()), file_name))
        if not matches:
            return None
        return os.path.join(self._data_dir, min(matches)[1])

    def fetch_text(self, identifier: str) -> str:
        """Return the raw text of the file stored under identifier."""
        file_path = self._find_file(identifier)
        if file_path is None:
            raise KeyError(identifier)
        with open(file_path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    def results(self, id: str) -> Optional[List[ParseResult]]:
        """
        Parse every record of a file, including failed ones.

        Returns:
            One ParseResult per record, or None if there is no such file
        """
        if id in self._cache:
            return self._cache[id]

        try:
            text = self.fetch_text(id)
        except KeyError:
            return None

        results = parse_sdf_records(text, self._options)
        for record_num, result in enumerate(results, start=1):
            if not result.ok:
                logger.warning(
                    f"{id} record {record_num} skipped: {result.failure.message}"
                )
            elif result.warnings:
                logger.info(
                    f"{id} record {record_num}: {len(result.warnings)} lines skipped"
                )

        self._cache[id] = results
        return results

    def get(self, id: str) -> Optional[List[Molecule]]:
        """
        Retrieve all successfully parsed molecules for a structure by ID.

        Args:
            id: File name without extension

        Returns:
            List of Molecule objects, one per good record, or None
        """
        results = self.results(id)
        if results is None:
            return None
        molecules = [result.molecule for result in results if result.ok]
        return molecules or None

    def list(self) -> Dict[str, List[Molecule]]:
        """
        List all available molecules.

        Returns:
            Dictionary mapping file IDs to their molecules
        """
        structures = {}
        for file_name in sorted(os.listdir(self._data_dir)):
            id, extension = os.path.splitext(file_name)
            if extension.lower() in EXTENSIONS:
                if molecules := self.get(id):
                    structures[id] = molecules
        return structures
