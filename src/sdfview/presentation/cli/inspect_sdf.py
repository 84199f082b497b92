"""Command-line interface for inspecting SDF / Molfile files."""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from tqdm import tqdm

from ...core.domain.models.parse_result import ParseResult
from ...core.parsing.bond_block_parser import BondIndexing
from ...core.parsing.molecule_builder import COORDINATE_SCALE
from ...core.parsing.records import parse_sdf_records
from ...core.parsing.sdf_parser import ParseOptions

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
    )


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Parse SDF / Molfile V2000 files and summarize the molecules"
    )
    parser.add_argument("files", nargs="+", help="SDF or Molfile paths")
    parser.add_argument(
        "--scale",
        type=float,
        default=COORDINATE_SCALE,
        help="Factor applied to every atom coordinate",
    )
    parser.add_argument(
        "--bond-indexing",
        choices=[choice.value for choice in BondIndexing],
        default=BondIndexing.REMAP.value,
        help="How bond endpoints are resolved when atom lines were skipped",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat skipped atom or bond lines as failures",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON output")
    parser.add_argument("--no-progress", action="store_true", help="Hide progress bar")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log parse details")
    parser.add_argument("--log-file", help="Also write log messages to this file")
    return parser


def result_to_dict(path: str, record_num: int, result: ParseResult) -> Dict[str, Any]:
    """Summarize one parsed record as JSON-serializable data."""
    summary: Dict[str, Any] = {
        "file": path,
        "record": record_num,
        "ok": result.ok,
        "warnings": [
            {
                "kind": warning.kind.value,
                "line_index": warning.line_index,
                "message": warning.message,
            }
            for warning in result.warnings
        ],
    }
    if result.ok:
        molecule = result.molecule
        summary.update(
            {
                "formula": molecule.formula(),
                "num_atoms": molecule.num_atoms,
                "num_bonds": molecule.num_bonds,
                "atoms": [
                    {"atomic_number": atom.atomic_number, "position": list(atom.position)}
                    for atom in molecule.atoms
                ],
                "bonds": [
                    [bond.from_index, bond.to_index, bond.order.name.lower()]
                    for bond in molecule.bonds
                ],
            }
        )
    else:
        summary["error"] = {
            "kind": result.failure.kind.value,
            "message": result.failure.message,
        }
    return summary


def format_summary(summary: Dict[str, Any]) -> str:
    """One-line text rendering of result_to_dict output."""
    label = f"{summary['file']}[{summary['record']}]"
    if not summary["ok"]:
        return f"{label}: FAILED ({summary['error']['kind']}) {summary['error']['message']}"
    return (
        f"{label}: {summary['formula']}, {summary['num_atoms']} atoms, "
        f"{summary['num_bonds']} bonds, {len(summary['warnings'])} warnings"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the inspection CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    options = ParseOptions(
        scale=args.scale, bond_indexing=BondIndexing(args.bond_indexing)
    )

    summaries = []
    failed = False
    for path in tqdm(args.files, desc="Parsing", unit="file", disable=args.no_progress):
        try:
            # Non-ASCII bytes only turn up in the free-form header lines
            text = Path(path).read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error(f"Cannot read {path}: {e}")
            failed = True
            continue

        results = parse_sdf_records(text, options)
        if not results:
            logger.error(f"No records found in {path}")
            failed = True
        for record_num, result in enumerate(results, start=1):
            for warning in result.warnings:
                logger.info(f"{path}[{record_num}] line {warning.line_index}: {warning.message}")
            if not result.ok or (args.strict and result.warnings):
                failed = True
            summaries.append(result_to_dict(path, record_num, result))

    if args.json:
        print(json.dumps(summaries, indent=2))
    else:
        for summary in summaries:
            print(format_summary(summary))

    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
