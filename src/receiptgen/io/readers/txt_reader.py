"""Plain-text line reader.

This module exposes :func:`read_lines` which loads a delimited text file as a
list of lines with their terminators removed.  UTF-8 byte-order marks (BOM)
are handled transparently by using the ``"utf-8-sig"`` codec by default.

``OSError`` and decoding failures raised while reading the file are turned into
:class:`~receiptgen.utils.errors.InputFileError` so callers can report the
file name alongside the cause.
"""

from __future__ import annotations

import os

from ...utils.errors import InputFileError

PathLikeStr = os.PathLike[str]


def read_lines(
    path: str | PathLikeStr,
    *,
    encoding: str = "utf-8-sig",
    errors: str = "strict",
) -> list[str]:
    """Read ``path`` and return its lines without line terminators.

    Parameters
    ----------
    path:
        Path to the file on disk.
    encoding:
        Text encoding to use.  Defaults to ``"utf-8-sig"`` so that a UTF-8 BOM
        is consumed when present.
    errors:
        Error handling strategy passed to :func:`open`.

    Raises
    ------
    InputFileError
        If the file cannot be opened or read.
    """

    try:
        with open(path, "r", encoding=encoding, errors=errors) as f:
            return f.read().splitlines()
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise InputFileError(path, reason) from exc
    except UnicodeDecodeError as exc:
        raise InputFileError(path, str(exc)) from exc


__all__ = ["read_lines"]
