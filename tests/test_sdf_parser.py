import random

import pytest

from sdfview.core.domain.models.bond import Bond, BondOrder
from sdfview.core.domain.models.parse_result import (
    ParseErrorKind,
    ParseWarningKind,
    SDFParseError,
)
from sdfview.core.parsing import BondIndexing, ParseOptions, parse_sdf
from sdfview.core.parsing.line_normalizer import normalize_lines

from conftest import molfile


def warning_kinds(result):
    return [warning.kind for warning in result.warnings]


class TestLineNormalizer:
    def test_drops_blank_lines_and_trims_right(self):
        text = "a  \n\n   \n  b\t\r\nc"
        assert normalize_lines(text) == ["a", "  b", "c"]

    def test_mixed_line_breaks(self):
        assert normalize_lines("a\rb\r\nc\nd") == ["a", "b", "c", "d"]

    def test_empty(self):
        assert normalize_lines("") == []


class TestWater:
    def test_atoms_scaled_and_ordered(self, water_text):
        result = parse_sdf(water_text)

        assert result.ok
        assert result.warnings == ()
        atoms = result.molecule.atoms
        assert [atom.atomic_number for atom in atoms] == [8, 1, 1]
        assert atoms[0].position == pytest.approx((0.0, 0.0, 0.0))
        assert atoms[1].position == pytest.approx((1.5144, 1.1736, 0.0))
        assert atoms[2].position == pytest.approx((-1.5144, 1.1736, 0.0))

    def test_bonds(self, water_text):
        molecule = parse_sdf(water_text).unwrap()
        assert molecule.bonds == (
            Bond(0, 1, BondOrder.SINGLE),
            Bond(0, 2, BondOrder.SINGLE),
        )

    def test_parsing_twice_gives_equal_molecules(self, water_text):
        assert parse_sdf(water_text).molecule == parse_sdf(water_text).molecule

    def test_line_break_styles_agree(self, water_text):
        expected = parse_sdf(water_text).molecule
        assert parse_sdf(water_text.replace("\n", "\r\n")).molecule == expected
        assert parse_sdf(water_text.replace("\n", "\r")).molecule == expected

    def test_custom_scale(self, water_text):
        molecule = parse_sdf(water_text, ParseOptions(scale=1.0)).unwrap()
        assert molecule.atoms[1].position == pytest.approx((0.7572, 0.5868, 0.0))


class TestFatalErrors:
    @pytest.mark.parametrize("text", ["", "   \n\n", "a\nb\nc\n  1  0"])
    def test_insufficient_lines(self, text):
        result = parse_sdf(text)
        assert not result.ok
        assert result.failure.kind is ParseErrorKind.INSUFFICIENT_LINES

    def test_malformed_counts_line(self):
        text = "title\nprogram\ncomment\nthree two\n0.0 0.0 0.0 C\n"
        result = parse_sdf(text)
        assert result.failure.kind is ParseErrorKind.MALFORMED_COUNTS_LINE

    def test_counts_line_with_one_token(self):
        text = "title\nprogram\ncomment\n  3\n0.0 0.0 0.0 C\n"
        result = parse_sdf(text)
        assert result.failure.kind is ParseErrorKind.MALFORMED_COUNTS_LINE

    @pytest.mark.parametrize("counts", [" -1  0", "  2 -1"])
    def test_negative_counts(self, counts):
        text = f"t\np\nc\n{counts}\n0.0 0.0 0.0 C\n1.0 0.0 0.0 C"
        result = parse_sdf(text)
        assert result.failure.kind is ParseErrorKind.MALFORMED_COUNTS_LINE

    def test_all_unrecognized_elements(self):
        text = molfile(["0.0 0.0 0.0 X", "1.0 0.0 0.0 Xe"], [])
        result = parse_sdf(text)

        assert result.failure.kind is ParseErrorKind.NO_ATOMS_PARSED
        assert warning_kinds(result) == [ParseWarningKind.UNRECOGNIZED_ELEMENT] * 2

    def test_unwrap_raises(self):
        with pytest.raises(SDFParseError) as excinfo:
            parse_sdf("").unwrap()
        assert excinfo.value.failure.kind is ParseErrorKind.INSUFFICIENT_LINES
        assert isinstance(excinfo.value, ValueError)


class TestCountsLineLocation:
    def test_fourth_line_used_when_comment_present(self):
        text = molfile(["0.0 0.0 0.0 C", "1.2 0.0 0.0 O"], ["1 2 2"])
        molecule = parse_sdf(text).unwrap()
        assert molecule.num_atoms == 2
        assert molecule.bonds[0].order is BondOrder.DOUBLE

    def test_tagged_counts_line_preferred(self):
        # Blank comment dropped; the first atom line has integer coordinates
        lines = [
            "title",
            "program",
            "  2  1  0  0  0  0  0  0  0  0999 V2000",
            "0 0 0 C",
            "1 0 0 O",
            "1 2 1",
        ]
        molecule = parse_sdf("\n".join(lines)).unwrap()
        assert [atom.atomic_number for atom in molecule.atoms] == [6, 8]
        assert molecule.num_bonds == 1

    def test_untagged_counts_line_beats_integer_atom_line(self):
        text = "title\nprogram\n\n  2  1\n0 0 0 C\n1 0 0 O\n1 2 1"
        molecule = parse_sdf(text).unwrap()

        assert [atom.atomic_number for atom in molecule.atoms] == [6, 8]
        assert molecule.bonds == (Bond(0, 1, BondOrder.SINGLE),)

    def test_fourth_line_wins_between_two_numeric_lines(self):
        lines = [
            "title",
            "program",
            "  1  0",
            "  2  1",
            "0.0 0.0 0.0 C",
            "1.2 0.0 0.0 O",
            "1 2 2",
        ]
        molecule = parse_sdf("\n".join(lines)).unwrap()

        assert molecule.num_atoms == 2
        assert molecule.bonds == (Bond(0, 1, BondOrder.DOUBLE),)


class TestAtomBlock:
    def test_truncated_block_keeps_partial_atoms(self):
        text = molfile(["0.0 0.0 0.0 C", "1.0 0.0 0.0 C", "2.0 0.0 0.0 O"], [], num_atoms=5)
        result = parse_sdf(text.replace("\nM  END", ""))

        assert result.ok
        assert result.molecule.num_atoms == 3
        assert warning_kinds(result) == [ParseWarningKind.TRUNCATED_BLOCK]

    @pytest.mark.parametrize(
        "line",
        ["0.0 0.0 C", "0.0 abc 0.0 C", "nan 0.0 0.0 C", "1_0 0.0 0.0 C"],
    )
    def test_malformed_atom_line_skipped(self, line):
        text = molfile(["0.0 0.0 0.0 O", line], [])
        result = parse_sdf(text)

        assert result.molecule.num_atoms == 1
        assert warning_kinds(result) == [ParseWarningKind.MALFORMED_ATOM_LINE]
        assert result.warnings[0].line_index == 5
        assert result.warnings[0].line == line

    def test_recognized_elements(self):
        symbols = ["H", "C", "N", "O", "F", "S", "Cl", "Br", "I"]
        text = molfile([f"0.0 0.0 0.0 {symbol}" for symbol in symbols], [])
        molecule = parse_sdf(text).unwrap()
        assert [atom.atomic_number for atom in molecule.atoms] == [
            1, 6, 7, 8, 9, 16, 17, 35, 53,
        ]

    def test_symbols_are_case_sensitive(self):
        text = molfile(["0.0 0.0 0.0 C", "0.0 0.0 0.0 CL"], [])
        result = parse_sdf(text)
        assert result.molecule.num_atoms == 1
        assert warning_kinds(result) == [ParseWarningKind.UNRECOGNIZED_ELEMENT]


class TestBondBlock:
    @pytest.mark.parametrize(
        "code, order",
        [
            (1, BondOrder.SINGLE),
            (2, BondOrder.DOUBLE),
            (3, BondOrder.TRIPLE),
            (4, BondOrder.UNKNOWN),
            (0, BondOrder.UNKNOWN),
        ],
    )
    def test_bond_order_codes(self, code, order):
        text = molfile(["0.0 0.0 0.0 C", "1.0 0.0 0.0 C"], [f"1 2 {code}"])
        assert parse_sdf(text).molecule.bonds[0].order is order

    @pytest.mark.parametrize("line", ["1 2", "1 b 1", "1.0 2 1"])
    def test_malformed_bond_line_skipped(self, line):
        text = molfile(["0.0 0.0 0.0 C", "1.0 0.0 0.0 C"], [line, "2 1 1"])
        result = parse_sdf(text)

        assert result.molecule.bonds == (Bond(1, 0, BondOrder.SINGLE),)
        assert warning_kinds(result) == [ParseWarningKind.MALFORMED_BOND_LINE]

    @pytest.mark.parametrize("line", ["0 1 1", "1 3 1", "-1 2 1"])
    def test_out_of_range_bond_skipped(self, line):
        text = molfile(["0.0 0.0 0.0 C", "1.0 0.0 0.0 C"], [line])
        result = parse_sdf(text)

        assert result.molecule.bonds == ()
        assert warning_kinds(result) == [ParseWarningKind.BOND_INDEX_OUT_OF_RANGE]

    def test_truncated_bond_block(self):
        text = molfile(["0.0 0.0 0.0 C", "1.0 0.0 0.0 C"], ["1 2 1"], num_bonds=3)
        result = parse_sdf(text.replace("\nM  END", ""))

        assert result.molecule.num_bonds == 1
        assert warning_kinds(result) == [ParseWarningKind.TRUNCATED_BLOCK]

    def test_bond_block_position_fixed_by_declared_count(self):
        # The skipped atom line still occupies its slot in the file
        text = molfile(["0.0 0.0 0.0 C", "bad line", "1.0 0.0 0.0 O"], ["1 3 2"])
        result = parse_sdf(text)

        assert result.molecule.bonds == (Bond(0, 1, BondOrder.DOUBLE),)


class TestSkippedAtomIndexing:
    def test_remap_drops_bonds_to_skipped_atom(self, unrecognized_text):
        result = parse_sdf(unrecognized_text)
        molecule = result.molecule

        assert [atom.atomic_number for atom in molecule.atoms] == [8, 1]
        assert molecule.bonds == (Bond(0, 1, BondOrder.SINGLE),)
        assert warning_kinds(result) == [
            ParseWarningKind.UNRECOGNIZED_ELEMENT,
            ParseWarningKind.BOND_TO_SKIPPED_ATOM,
        ]
        assert result.warnings[0].line_index == 5

    def test_positional_uses_file_positions(self, unrecognized_text):
        options = ParseOptions(bond_indexing=BondIndexing.POSITIONAL)
        result = parse_sdf(unrecognized_text, options)
        molecule = result.molecule

        assert molecule.num_atoms == 2
        # 1-2 now binds O to H; 1-3 points past the end of the atom list
        assert molecule.bonds == (Bond(0, 1, BondOrder.SINGLE),)
        assert warning_kinds(result) == [
            ParseWarningKind.UNRECOGNIZED_ELEMENT,
            ParseWarningKind.BOND_INDEX_OUT_OF_RANGE,
        ]


def random_molfile(rng, symbols):
    num_atoms = rng.randint(1, 12)
    num_bonds = rng.randint(0, 15)
    atom_lines = [
        "{:.4f} {:.4f} {:.4f} {}".format(
            rng.uniform(-5, 5), rng.uniform(-5, 5), rng.uniform(-5, 5), rng.choice(symbols)
        )
        for _ in range(num_atoms)
    ]
    bond_lines = [
        "{} {} {}".format(
            rng.randint(1, num_atoms), rng.randint(1, num_atoms), rng.randint(1, 3)
        )
        for _ in range(num_bonds)
    ]
    return molfile(atom_lines, bond_lines), num_atoms, num_bonds, atom_lines


def test_valid_inputs_keep_declared_shape():
    rng = random.Random(7)
    for _ in range(50):
        text, num_atoms, num_bonds, atom_lines = random_molfile(rng, ["H", "C", "N", "O"])
        result = parse_sdf(text)

        assert result.warnings == ()
        assert result.molecule.num_atoms == num_atoms
        assert result.molecule.num_bonds == num_bonds
        for atom, line in zip(result.molecule.atoms, atom_lines):
            assert atom.position[0] == pytest.approx(float(line.split()[0]) * 2.0)


@pytest.mark.parametrize("indexing", list(BondIndexing))
def test_bonds_never_reference_missing_atoms(indexing):
    rng = random.Random(11)
    options = ParseOptions(bond_indexing=indexing)
    for _ in range(100):
        text, *_ = random_molfile(rng, ["C", "O", "X", "Zz", "H"])
        result = parse_sdf(text, options)
        if not result.ok:
            assert result.failure.kind is ParseErrorKind.NO_ATOMS_PARSED
            continue
        for bond in result.molecule.bonds:
            assert 0 <= bond.from_index < result.molecule.num_atoms
            assert 0 <= bond.to_index < result.molecule.num_atoms
