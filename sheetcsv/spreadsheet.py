# -*- coding: utf-8 -*-
"""
Spreadsheet - sparse, grow-only 2-D cell store

Cells are kept in a dictionary keyed by zero-based ``(row, col)`` tuples and
only non-empty strings are ever stored. The ``rows`` and ``columns`` counts
only grow as cells are updated; ``shrink()`` is the single operation that
tightens them to fit the data, and it scans every key, so callers should run
it once right before a full export rather than after each mutation.

Instances carry no internal locking. A spreadsheet must be owned by one
decode/encode/mutation at a time.

Excel-style addresses (``B3``, ``AA10``, ``C``, ``7``) convert to and from
``(row, col)`` tuples; an omitted half is represented by ``-1``.

Example:
    >>> from sheetcsv.spreadsheet import Spreadsheet
    >>> sheet = Spreadsheet()
    >>> sheet.update(sheet.index("B3"), "hello")
    >>> sheet.rows, sheet.columns
    (3, 2)
    >>> sheet.address((2, 1))
    'B3'
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from sheetcsv.exceptions import MalformedAddress

logger = logging.getLogger(__name__)

__all__ = [
    "CellIndex",
    "Spreadsheet",
    "parse_address",
    "format_address",
]

CellIndex = Tuple[int, int]

_ALPHABET_SIZE = 26


# ---------------------------------------------------------------------------
# Address codec
# ---------------------------------------------------------------------------


def parse_address(addr: str) -> CellIndex:
    """Convert an Excel-type cell address to a ``(row, col)`` tuple.

    Column letters use bijective base 26 (``A`` = 0, ``Z`` = 25,
    ``AA`` = 26) and must all precede the 1-based row number. Matching is
    case-insensitive. A missing row or column yields ``-1`` in that slot, so
    ``"C"`` parses to ``(-1, 2)`` and ``"7"`` to ``(6, -1)``.
    A row number of ``0`` also yields ``-1``, so ``"A0"`` parses the same as
    ``"A"``.

    Args:
        addr: Address string such as ``"B3"``.

    Returns:
        Tuple of ``(row, col)``.

    Raises:
        MalformedAddress: On a character outside ``[A-Za-z0-9]`` or a column
            letter after the row digits have started.
    """
    row = 0
    col_number = 0  # 1-based while parsing, 0 means no column letters
    parsing_row = False

    for position, raw in enumerate(addr):
        # Case-fold ASCII only
        char = raw.upper() if raw.isascii() else raw
        if "0" <= char <= "9":
            parsing_row = True
            row = row * 10 + (ord(char) - ord("0"))
        elif "A" <= char <= "Z":
            if parsing_row:
                raise MalformedAddress(
                    message=f"Column letter {raw} appears in row number",
                    address=addr,
                    character=raw,
                    position=position,
                )
            col_number = col_number * _ALPHABET_SIZE + (ord(char) - ord("A") + 1)
        else:
            raise MalformedAddress(
                message=f"Invalid character {raw!r}",
                address=addr,
                character=raw,
                position=position,
            )

    return row - 1, col_number - 1


def format_address(idx: CellIndex) -> str:
    """Convert a ``(row, col)`` tuple to an Excel-type cell address.

    A negative value in either slot omits that part of the address.

    Args:
        idx: Tuple of ``(row, col)``.

    Returns:
        Address string such as ``"B3"``.
    """
    row, col = idx
    letters: List[str] = []
    if col >= 0:
        number = col + 1
        while number > 0:
            number, remainder = divmod(number - 1, _ALPHABET_SIZE)
            letters.append(chr(ord("A") + remainder))
        letters.reverse()
    addr = "".join(letters)
    if row >= 0:
        addr += str(row + 1)
    return addr


# ---------------------------------------------------------------------------
# Spreadsheet
# ---------------------------------------------------------------------------


class Spreadsheet:
    """Sparse spreadsheet of string cells.

    Attributes:
        data: Mapping of ``(row, col)`` to non-empty cell text.
        rows: Number of rows; at least one more than the highest populated
            row index, possibly more.
        columns: Number of columns, with the same guarantee as ``rows``.
    """

    def __init__(self) -> None:
        self.data: Dict[CellIndex, str] = {}
        self.rows: int = 0
        self.columns: int = 0

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> "Spreadsheet":
        """Build a spreadsheet from a row-major sequence of cell values.

        Every value, empty or not, is passed through ``update`` so the
        dimensions cover the full rectangle given.
        """
        sheet = cls()
        for row_idx, values in enumerate(rows):
            for col_idx, value in enumerate(values):
                sheet.update((row_idx, col_idx), value)
        return sheet

    # ------------------------------------------------------------------
    # Address codec
    # ------------------------------------------------------------------

    @staticmethod
    def index(addr: str) -> CellIndex:
        """Parse an Excel-type address. See :func:`parse_address`."""
        return parse_address(addr)

    @staticmethod
    def address(idx: CellIndex) -> str:
        """Format a ``(row, col)`` tuple. See :func:`format_address`."""
        return format_address(idx)

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def update(self, idx: CellIndex, value: str) -> None:
        """Add, replace or remove a cell.

        An empty ``value`` removes the cell if present and stores nothing.
        The row/column counts are extended to cover ``idx`` either way.

        Args:
            idx: Zero-based ``(row, col)`` tuple.
            value: Cell text.
        """
        if value:
            self.data[idx] = value
        else:
            self.data.pop(idx, None)

        row, col = idx
        if self.rows < row + 1:
            self.rows = row + 1
        if self.columns < col + 1:
            self.columns = col + 1

    def get(self, idx: CellIndex) -> str:
        """Return the cell text at ``idx`` or ``""`` when absent."""
        return self.data.get(idx, "")

    def shrink(self) -> None:
        """Shrink ``rows`` and ``columns`` to fit the stored cells.

        Scans every key; call it as infrequently as possible, typically once
        before writing the sheet out.
        """
        if not self.data:
            self.rows = self.columns = 0
        else:
            self.rows = max(row for row, _ in self.data) + 1
            self.columns = max(col for _, col in self.data) + 1
        logger.debug("Spreadsheet shrunk to %d x %d", self.rows, self.columns)

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def cells(self) -> Iterator[Tuple[CellIndex, str]]:
        """Yield populated cells in row-major order."""
        for idx in sorted(self.data):
            yield idx, self.data[idx]

    def row(self, row: int) -> List[str]:
        """Return one row across the declared column count."""
        return [self.get((row, col)) for col in range(self.columns)]

    def to_rows(self) -> List[List[str]]:
        """Return the full declared rectangle as a list of rows."""
        return [self.row(row) for row in range(self.rows)]

    # ------------------------------------------------------------------
    # Dunder protocol
    # ------------------------------------------------------------------

    def __getitem__(self, idx: CellIndex) -> str:
        return self.get(idx)

    def __setitem__(self, idx: CellIndex, value: str) -> None:
        self.update(idx, value)

    def __contains__(self, idx: object) -> bool:
        return idx in self.data

    def __len__(self) -> int:
        return len(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Spreadsheet):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.columns == other.columns
            and self.data == other.data
        )

    def __repr__(self) -> str:
        return (
            f"Spreadsheet(rows={self.rows}, columns={self.columns}, "
            f"cells={len(self.data)})"
        )
