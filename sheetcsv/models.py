# -*- coding: utf-8 -*-
"""
sheetcsv Data Models

Pydantic v2 models shared by the codec, the configuration layer and the CLI.

Models:
    - CodecDialect: validated delimiter / escape / newline settings for one
      decode or encode run
    - SheetSummary: dimensions and content hash of a Spreadsheet
"""

from __future__ import annotations

import hashlib
import os
from datetime import datetime, timezone
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator, model_validator

if TYPE_CHECKING:
    from sheetcsv.spreadsheet import Spreadsheet


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _utcnow() -> datetime:
    """Return current UTC datetime with microseconds zeroed."""
    return datetime.now(timezone.utc).replace(microsecond=0)


# =============================================================================
# CodecDialect
# =============================================================================


class CodecDialect(BaseModel):
    """Wire-format settings for the CSV codec.

    An empty ``newline`` is only meaningful for decoding, where it selects
    permissive mode (``\\r``, ``\\n``, ``\\r\\n`` and ``\\n\\r`` all end a
    row). The encoder rejects it.

    Attributes:
        delimiter: Single character separating cells in a row.
        escape: Single character enclosing cells that need quoting.
        newline: Row terminator on the wire.
        cell_newline: Newline used inside multi-line cell text in memory.
    """

    delimiter: str = Field(default=",", description="Cell separator")
    escape: str = Field(default='"', description="Quote/escape character")
    newline: str = Field(default="", description="Row terminator on the wire")
    cell_newline: str = Field(
        default=os.linesep, description="In-memory newline inside cells",
    )

    model_config = {"extra": "forbid", "frozen": True}

    @field_validator("delimiter", "escape")
    @classmethod
    def _single_character(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("must be a single character")
        return v

    @field_validator("cell_newline")
    @classmethod
    def _non_empty_cell_newline(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v

    @model_validator(mode="after")
    def _distinct_delimiter_and_escape(self) -> "CodecDialect":
        if self.delimiter == self.escape:
            raise ValueError("delimiter and escape must differ")
        terminator = self.newline or "\r\n"
        if self.delimiter in terminator or self.escape in terminator:
            raise ValueError("delimiter and escape must not appear in newline")
        return self

    @property
    def permissive_newline(self) -> bool:
        """Whether any CR/LF combination terminates a row."""
        return not self.newline


# =============================================================================
# SheetSummary
# =============================================================================


class SheetSummary(BaseModel):
    """Dimensions and provenance hash of a Spreadsheet."""

    rows: int = Field(default=0, ge=0, description="Declared row count")
    columns: int = Field(default=0, ge=0, description="Declared column count")
    cell_count: int = Field(default=0, ge=0, description="Populated cells")
    content_hash: str = Field(
        default="", description="SHA-256 over populated cells in row-major order",
    )
    created_at: datetime = Field(
        default_factory=_utcnow, description="Summary timestamp",
    )

    model_config = {"extra": "forbid"}

    @classmethod
    def from_sheet(cls, sheet: "Spreadsheet") -> "SheetSummary":
        """Summarise ``sheet`` without modifying it."""
        digest = hashlib.sha256()
        for (row, col), value in sheet.cells():
            digest.update(f"{row}:{col}:{len(value)}:".encode("utf-8"))
            digest.update(value.encode("utf-8", "surrogatepass"))
        return cls(
            rows=sheet.rows,
            columns=sheet.columns,
            cell_count=len(sheet),
            content_hash=digest.hexdigest(),
        )


__all__ = [
    "CodecDialect",
    "SheetSummary",
]
