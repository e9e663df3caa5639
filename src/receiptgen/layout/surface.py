"""Drawing surface protocol and an in-memory recording implementation.

The layout engine only talks to a :class:`Surface`.  Coordinates are
millimetres with the origin at the bottom-left corner of the page, matching
the PDF convention.  :class:`RecordingSurface` keeps every call as a
:class:`DrawCommand` grouped by page so layouts can be compared without a
document backend.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, Union, runtime_checkable


@dataclass(frozen=True, slots=True)
class Line:
    """A straight cut line from ``(x1, y1)`` to ``(x2, y2)``."""

    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def is_vertical(self) -> bool:
        return self.x1 == self.x2

    @property
    def is_horizontal(self) -> bool:
        return self.y1 == self.y2


@dataclass(frozen=True, slots=True)
class Text:
    """A single line of text with its baseline origin."""

    text: str
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Image:
    """An image anchored at its bottom-left corner."""

    path: Path
    x: float
    y: float
    scale: float


DrawCommand = Union[Line, Text, Image]


@runtime_checkable
class Surface(Protocol):
    """Minimal set of drawing operations needed to lay out receipts."""

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        ...

    def place_text(self, text: str, x: float, y: float) -> None:
        ...

    def place_image(self, path: str | os.PathLike[str], x: float, y: float, scale: float) -> None:
        ...

    def new_page(self) -> None:
        """Finish the current page and start drawing on a fresh one."""

        ...

    def save(self) -> None:
        """Persist the document."""

        ...


@dataclass
class RecordingSurface:
    """Surface that records draw commands instead of rendering them."""

    pages: list[list[DrawCommand]] = field(default_factory=lambda: [[]])
    saved: bool = False

    @property
    def current(self) -> list[DrawCommand]:
        return self.pages[-1]

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self.current.append(Line(x1, y1, x2, y2))

    def place_text(self, text: str, x: float, y: float) -> None:
        self.current.append(Text(text, x, y))

    def place_image(self, path: str | os.PathLike[str], x: float, y: float, scale: float) -> None:
        self.current.append(Image(Path(path), x, y, scale))

    def new_page(self) -> None:
        self.pages.append([])

    def save(self) -> None:
        self.saved = True

    def commands(self, kind: type | None = None) -> list[DrawCommand]:
        """Return all commands across pages, optionally filtered by type."""

        out = [cmd for page in self.pages for cmd in page]
        if kind is not None:
            out = [cmd for cmd in out if isinstance(cmd, kind)]
        return out


__all__ = ["DrawCommand", "Image", "Line", "RecordingSurface", "Surface", "Text"]
