"""Extension based registry for output surfaces.

Only ``.pdf`` is registered.  :func:`open_surface` dispatches on the output
file extension and raises ``UnsupportedFormatError`` when no surface handles
it.  Input files are read with :func:`read_lines` regardless of extension.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Callable

from ..config.schema import LayoutSettings
from ..layout.surface import Surface
from ..utils.errors import UnsupportedFormatError
from .readers.txt_reader import read_lines
from .writers.pdf_writer import PdfSurface

SurfaceFactory = Callable[..., Surface]

_SURFACES: dict[str, SurfaceFactory] = {}


def register_surface(ext: str, factory: SurfaceFactory) -> None:
    """Register a surface factory for output files ending with ``ext``.

    Matching is case-insensitive; ``ext`` includes the dot (e.g. ``".pdf"``).
    """

    _SURFACES[ext.lower()] = factory


def get_extension(path: str | os.PathLike[str]) -> str:
    """Return the lower-cased file extension of ``path`` (including the dot)."""

    suffix = Path(path).suffix
    return suffix.lower() if suffix else ""


def open_surface(
    path: str | os.PathLike[str], layout: LayoutSettings, **kwargs: Any
) -> Surface:
    """Create the surface registered for the extension of ``path``.

    Raises
    ------
    UnsupportedFormatError
        If no surface is registered for the file extension.
    """

    ext = get_extension(path)
    factory = _SURFACES.get(ext)
    if factory is None:
        raise UnsupportedFormatError(f"Unsupported output extension: '{ext}'") from None
    return factory(path, layout, **kwargs)


register_surface(".pdf", PdfSurface)

__all__ = [
    "SurfaceFactory",
    "get_extension",
    "open_surface",
    "read_lines",
    "register_surface",
]
