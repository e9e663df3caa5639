"""Packaged static assets (receipt logo)."""

from __future__ import annotations

from contextlib import AbstractContextManager
from importlib import resources as importlib_resources
from pathlib import Path

LOGO_NAME = "logo.bmp"


def default_logo() -> AbstractContextManager[Path]:
    """Return a context manager yielding a filesystem path to the packaged logo."""

    return importlib_resources.as_file(
        importlib_resources.files("receiptgen.assets").joinpath(LOGO_NAME)
    )


__all__ = ["LOGO_NAME", "default_logo"]
