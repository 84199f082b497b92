"""Shared Molfile fixtures."""

import os

import pytest

TEST_DATA_DIR = os.path.join(os.path.dirname(__file__), "test_data", "input")

WATER_LINES = [
    "Water",
    "  Generated",
    "",
    "  3  2  0  0  0  0  0  0  0  0999 V2000",
    "0.0000 0.0000 0.0000 O 0 0 0 0 0 0 0 0 0 0 0 0",
    "0.7572 0.5868 0.0000 H 0 0 0 0 0 0 0 0 0 0 0 0",
    "-0.7572 0.5868 0.0000 H 0 0 0 0 0 0 0 0 0 0 0 0",
    "1 2 1 0 0 0 0",
    "1 3 1 0 0 0 0",
]


def molfile(atom_lines, bond_lines, num_atoms=None, num_bonds=None, comment="comment"):
    """Build Molfile text with a non-blank comment so the counts line is 4th."""
    if num_atoms is None:
        num_atoms = len(atom_lines)
    if num_bonds is None:
        num_bonds = len(bond_lines)
    header = [
        "Test molecule",
        "  sdfview-tests",
        comment,
        f"{num_atoms:3d}{num_bonds:3d}  0  0  0  0  0  0  0  0999 V2000",
    ]
    return "\n".join(header + list(atom_lines) + list(bond_lines) + ["M  END"])


@pytest.fixture
def water_text():
    return "\n".join(WATER_LINES)


@pytest.fixture
def unrecognized_text():
    """O, X, H with bonds 1-2 and 1-3."""
    return molfile(
        [
            "    0.0000    0.0000    0.0000 O   0  0",
            "    1.0000    0.0000    0.0000 X   0  0",
            "    0.0000    1.0000    0.0000 H   0  0",
        ],
        ["  1  2  1  0", "  1  3  1  0"],
    )


@pytest.fixture
def water_path():
    return os.path.join(TEST_DATA_DIR, "water.sdf")


@pytest.fixture
def small_molecules_path():
    return os.path.join(TEST_DATA_DIR, "small_molecules.sdf")
