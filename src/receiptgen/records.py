"""Member record extraction from delimited text.

The input is read positionally: one header row at a configured line number
followed by the data rows.  Columns are looked up by exact header name, the
first matching position winning.  The fee value keeps its text form; only the
characters listed in ``strip_chars`` (``$`` and space by default) are removed.

Two policies exist for a required column missing from the header:

``error``
    :class:`MissingColumnError` is raised before any row is read.
``sentinel``
    The field is filled with the configured sentinel text and a warning is
    logged.  Rows that are too short for a column behave the same way.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .config.schema import InputSettings
from .io.readers.txt_reader import read_lines
from .models import Member
from .utils.errors import MissingColumnError, RowFormatError, StructuralShortfallError
from .utils.logging import get_logger

__all__ = ["HeaderIndex", "extract_members", "read_members", "select_data_rows"]

log = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class HeaderIndex:
    """Mapping of column names to zero-based field offsets."""

    delimiter: str
    offsets: dict[str, int]

    @classmethod
    def from_row(cls, row: str, delimiter: str) -> "HeaderIndex":
        offsets: dict[str, int] = {}
        for pos, name in enumerate(row.split(delimiter)):
            offsets.setdefault(name, pos)
        return cls(delimiter, offsets)

    def __contains__(self, name: object) -> bool:
        return name in self.offsets

    def missing(self, names: Iterable[str]) -> tuple[str, ...]:
        """Return the names from ``names`` absent from the header."""

        return tuple(name for name in names if name not in self.offsets)

    def lookup(self, row: str, name: str) -> str | None:
        """Return the field for ``name`` in ``row`` or ``None`` when unavailable."""

        pos = self.offsets.get(name)
        if pos is None:
            return None
        fields = row.split(self.delimiter)
        if pos >= len(fields):
            return None
        return fields[pos]


def select_data_rows(
    lines: Sequence[str], settings: InputSettings
) -> tuple[str, list[tuple[int, str]]]:
    """Return the header row and numbered data rows selected by ``settings``.

    Line numbers are one-indexed.  With ``data_rows`` set, exactly that many
    rows follow the header and rows beyond them are ignored; otherwise every
    non-blank line after the header is a data row.
    """

    header_idx = settings.header_line - 1
    if settings.data_rows is not None:
        required = settings.header_line + settings.data_rows
        if len(lines) < required:
            raise StructuralShortfallError(required, len(lines))
        start = header_idx + 1
        rows = [(i + 1, lines[i]) for i in range(start, start + settings.data_rows)]
    else:
        if len(lines) <= header_idx:
            raise StructuralShortfallError(settings.header_line, len(lines))
        rows = [
            (i + 1, lines[i])
            for i in range(header_idx + 1, len(lines))
            if lines[i].strip()
        ]
    return lines[header_idx], rows


def _fallback(line_number: int, column: str, settings: InputSettings) -> str:
    if settings.missing_column == "error":
        raise RowFormatError(line_number, column)
    log.warning("line %d: no data for column %r, using sentinel", line_number, column)
    return settings.sentinel


def _strip(value: str, chars: str) -> str:
    for ch in chars:
        value = value.replace(ch, "")
    return value


def extract_members(lines: Sequence[str], settings: InputSettings) -> list[Member]:
    """Build :class:`Member` records from already-read file ``lines``."""

    header_row, rows = select_data_rows(lines, settings)
    header = HeaderIndex.from_row(header_row, settings.delimiter)
    cols = settings.columns

    missing = header.missing(cols.required())
    if missing and settings.missing_column == "error":
        raise MissingColumnError(missing)

    members: list[Member] = []
    for line_number, row in rows:
        values: list[str] = []
        for column in cols.required():
            value = header.lookup(row, column)
            if value is None:
                values.append(_fallback(line_number, column, settings))
            elif column == cols.fee:
                values.append(_strip(value, settings.strip_chars))
            else:
                values.append(value)
        members.append(Member(*values))

    log.debug("extracted %d member(s) from %d data row(s)", len(members), len(rows))
    return members


def read_members(path: str | os.PathLike[str], settings: InputSettings) -> list[Member]:
    """Read ``path`` and return its members in file order."""

    lines = read_lines(path, encoding=settings.encoding)
    log.debug("read %d line(s) from %s", len(lines), path)
    return extract_members(lines, settings)
