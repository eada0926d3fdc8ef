# -*- coding: utf-8 -*-
"""Tests for the sparse Spreadsheet and the address codec.

Covers:
- Excel-type address parsing and formatting
- Malformed address detection
- update / get semantics and grow-only dimensions
- shrink
- Convenience protocol (len, contains, item access, equality, rows)
"""

import pytest

from sheetcsv.exceptions import MalformedAddress
from sheetcsv.spreadsheet import Spreadsheet, format_address, parse_address


# ==============================================================================
# Address Parsing
# ==============================================================================

class TestParseAddress:
    """Tests for parse_address / Spreadsheet.index."""

    @pytest.mark.parametrize("addr,expected", [
        ("A1", (0, 0)),
        ("B3", (2, 1)),
        ("Z10", (9, 25)),
        ("AA1", (0, 26)),
        ("AZ2", (1, 51)),
        ("BA2", (1, 52)),
        ("ZZ1", (0, 701)),
        ("AAA1", (0, 702)),
    ])
    def test_full_addresses(self, addr, expected):
        """Column letters are bijective base 26 and rows are 1-based."""
        assert parse_address(addr) == expected

    def test_lowercase_accepted(self):
        """Letters are matched case-insensitively."""
        assert Spreadsheet.index("b3") == (2, 1)
        assert Spreadsheet.index("aA12") == (11, 26)

    def test_column_only(self):
        """A missing row yields -1 in the row slot."""
        assert parse_address("C") == (-1, 2)

    def test_row_only(self):
        """A missing column yields -1 in the column slot."""
        assert parse_address("7") == (6, -1)

    def test_empty_address(self):
        """An empty address has neither part."""
        assert parse_address("") == (-1, -1)

    def test_row_zero_reads_as_missing_row(self):
        """Row 0 is below the 1-based range and maps to -1."""
        assert parse_address("A0") == parse_address("A") == (-1, 0)

    def test_non_ascii_position_reported(self):
        """Positions refer to the address as given."""
        with pytest.raises(MalformedAddress) as exc_info:
            parse_address("AB\u00df3")
        assert exc_info.value.position == 2

    def test_letter_after_digit_raises(self):
        """Column letters may not follow row digits."""
        with pytest.raises(MalformedAddress) as exc_info:
            parse_address("A1B")

        exc = exc_info.value
        assert exc.character == "B"
        assert exc.position == 2
        assert exc.address == "A1B"
        assert exc.context["position"] == 2

    @pytest.mark.parametrize("addr,bad", [
        ("$A$1", "$"),
        ("A-1", "-"),
        ("B 3", " "),
        ("\u00df1", "\u00df"),
        ("\u01311", "\u0131"),
        ("\ufb011", "\ufb01"),
        ("A\u212a1", "\u212a"),
    ])
    def test_invalid_character_raises(self, addr, bad):
        """Anything outside [A-Za-z0-9] is rejected."""
        with pytest.raises(MalformedAddress) as exc_info:
            parse_address(addr)

        assert exc_info.value.character == bad
        assert exc_info.value.error_code == "SHEETCSV_MALFORMED_ADDRESS"


# ==============================================================================
# Address Formatting
# ==============================================================================

class TestFormatAddress:
    """Tests for format_address / Spreadsheet.address."""

    @pytest.mark.parametrize("idx,expected", [
        ((0, 0), "A1"),
        ((2, 1), "B3"),
        ((0, 25), "Z1"),
        ((0, 26), "AA1"),
        ((4, 701), "ZZ5"),
        ((0, 702), "AAA1"),
    ])
    def test_format(self, idx, expected):
        """Formats column letters followed by the 1-based row."""
        assert Spreadsheet.address(idx) == expected

    def test_negative_parts_omitted(self):
        """A negative slot drops that part of the address."""
        assert format_address((-1, 2)) == "C"
        assert format_address((6, -1)) == "7"
        assert format_address((-1, -1)) == ""

    def test_inverse_of_parse(self):
        """index(address(idx)) returns idx for every non-negative index."""
        for row in range(0, 120, 7):
            for col in range(0, 800, 13):
                assert parse_address(format_address((row, col))) == (row, col)


# ==============================================================================
# Cell Storage
# ==============================================================================

class TestUpdate:
    """Tests for update / get and dimension tracking."""

    def test_new_sheet_is_empty(self):
        """A fresh sheet has no cells and zero dimensions."""
        sheet = Spreadsheet()
        assert sheet.rows == 0
        assert sheet.columns == 0
        assert len(sheet) == 0

    def test_update_stores_and_grows(self):
        """Storing a value extends rows and columns to cover it."""
        sheet = Spreadsheet()
        sheet.update((2, 1), "hello")

        assert sheet.get((2, 1)) == "hello"
        assert sheet.rows == 3
        assert sheet.columns == 2

    def test_get_missing_returns_empty(self):
        """Absent cells read as the empty string."""
        sheet = Spreadsheet()
        assert sheet.get((5, 5)) == ""

    def test_empty_value_removes_cell(self):
        """An empty update deletes the cell but keeps the dimensions."""
        sheet = Spreadsheet()
        sheet.update((1, 1), "x")
        sheet.update((1, 1), "")

        assert (1, 1) not in sheet
        assert sheet.data == {}
        assert sheet.rows == 2
        assert sheet.columns == 2

    def test_empty_value_still_grows(self):
        """An empty update on a fresh index grows the dimensions."""
        sheet = Spreadsheet()
        sheet.update((4, 3), "")

        assert len(sheet) == 0
        assert sheet.rows == 5
        assert sheet.columns == 4

    def test_dimensions_never_decrease(self):
        """update never lowers rows or columns."""
        sheet = Spreadsheet()
        sheet.update((9, 9), "far")
        sheet.update((0, 0), "near")
        sheet.update((9, 9), "")

        assert sheet.rows == 10
        assert sheet.columns == 10

    def test_replace_value(self):
        """A second update replaces the stored text."""
        sheet = Spreadsheet()
        sheet.update((0, 0), "one")
        sheet.update((0, 0), "two")
        assert sheet.get((0, 0)) == "two"
        assert len(sheet) == 1


class TestShrink:
    """Tests for Spreadsheet.shrink."""

    def test_shrink_to_tight_bound(self):
        """shrink tightens dimensions to the populated cells."""
        sheet = Spreadsheet()
        sheet.update((9, 9), "")
        sheet.update((2, 4), "x")
        sheet.update((3, 1), "y")
        sheet.shrink()

        assert sheet.rows == 4
        assert sheet.columns == 5

    def test_shrink_empty_sheet(self):
        """An empty sheet shrinks to 0 x 0."""
        sheet = Spreadsheet()
        sheet.update((3, 3), "")
        sheet.shrink()

        assert (sheet.rows, sheet.columns) == (0, 0)

    def test_shrink_is_idempotent(self):
        """A second shrink changes nothing."""
        sheet = Spreadsheet.from_rows([["a", ""], ["", ""]])
        sheet.shrink()
        sheet.shrink()
        assert (sheet.rows, sheet.columns) == (1, 1)


# ==============================================================================
# Conveniences
# ==============================================================================

class TestConveniences:
    """Tests for the container protocol and row helpers."""

    def test_item_access(self):
        """Item access maps to get / update."""
        sheet = Spreadsheet()
        sheet[Spreadsheet.index("B2")] = "v"

        assert sheet[(1, 1)] == "v"
        assert (1, 1) in sheet
        sheet[(1, 1)] = ""
        assert (1, 1) not in sheet

    def test_from_rows_and_to_rows(self):
        """from_rows covers the full rectangle given, to_rows returns it."""
        rows = [["a", "", "c"], ["", "e", ""]]
        sheet = Spreadsheet.from_rows(rows)

        assert sheet.rows == 2
        assert sheet.columns == 3
        assert len(sheet) == 3
        assert sheet.to_rows() == rows

    def test_row_spans_declared_columns(self):
        """row() pads with empty strings across all columns."""
        sheet = Spreadsheet()
        sheet.update((0, 3), "d")
        assert sheet.row(0) == ["", "", "", "d"]

    def test_cells_in_row_major_order(self):
        """cells() yields populated cells sorted by row then column."""
        sheet = Spreadsheet()
        sheet.update((1, 0), "c")
        sheet.update((0, 1), "b")
        sheet.update((0, 0), "a")

        assert [value for _, value in sheet.cells()] == ["a", "b", "c"]

    def test_equality(self):
        """Sheets are equal when cells and dimensions match."""
        first = Spreadsheet.from_rows([["a", "b"]])
        second = Spreadsheet.from_rows([["a", "b"]])
        assert first == second

        second.update((3, 0), "")
        assert first != second

    def test_repr(self):
        """repr reports dimensions and cell count."""
        sheet = Spreadsheet.from_rows([["a", ""]])
        assert repr(sheet) == "Spreadsheet(rows=1, columns=2, cells=1)"
