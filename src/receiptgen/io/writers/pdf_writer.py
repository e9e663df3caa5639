"""PDF rendering surface backed by ReportLab.

Purpose:
    Implement the drawing surface used by the layout engine on top of a
    ReportLab canvas.

Notes/Edge cases:
    - Coordinates arrive in millimetres and are converted to points here.
    - Images are sized from their pixel dimensions at ``logo_dpi`` and then
      scaled; the same file is embedded once however often it is drawn.
    - The canvas is created with ``invariant=1`` so repeated runs over the
      same input produce identical bytes.
    - Nothing touches the disk until :meth:`PdfSurface.save`.
"""

from __future__ import annotations

import os
from pathlib import Path

from reportlab.lib.units import inch, mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ...config.schema import LayoutSettings
from ...utils.errors import ImageFormatError


def load_image(path: str | os.PathLike[str]) -> ImageReader:
    """Open ``path`` as an image, raising :class:`ImageFormatError` if it cannot be decoded."""

    try:
        reader = ImageReader(str(path))
        reader.getSize()
    except (OSError, ValueError) as exc:
        raise ImageFormatError(f"cannot read image {path}: {exc}") from exc
    return reader


class PdfSurface:
    """Draw receipts onto a multi-page PDF document."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        layout: LayoutSettings,
        *,
        title: str = "Receipts",
    ) -> None:
        self.path = Path(path)
        self.layout = layout
        self._images: dict[Path, ImageReader] = {}
        self._canvas = canvas.Canvas(
            str(self.path),
            pagesize=(layout.page_width * mm, layout.page_height * mm),
            invariant=1,
        )
        self._canvas.setTitle(title)
        self._prepare_page()

    def _prepare_page(self) -> None:
        self._canvas.setFont(self.layout.font_name, self.layout.font_size)
        self._canvas.setLineWidth(self.layout.line_width)

    def _image(self, path: Path) -> ImageReader:
        reader = self._images.get(path)
        if reader is None:
            reader = load_image(path)
            self._images[path] = reader
        return reader

    def draw_line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._canvas.line(x1 * mm, y1 * mm, x2 * mm, y2 * mm)

    def place_text(self, text: str, x: float, y: float) -> None:
        self._canvas.drawString(x * mm, y * mm, text)

    def place_image(self, path: str | os.PathLike[str], x: float, y: float, scale: float) -> None:
        reader = self._image(Path(path))
        px_w, px_h = reader.getSize()
        dot = inch / self.layout.logo_dpi * scale
        self._canvas.drawImage(reader, x * mm, y * mm, width=px_w * dot, height=px_h * dot)

    def new_page(self) -> None:
        self._canvas.showPage()
        self._prepare_page()

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._canvas.save()


__all__ = ["PdfSurface", "load_image"]
