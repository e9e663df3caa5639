"""Receipt placement and pagination.

Receipts are laid out top to bottom in columns, left column first.  With the
default settings a page holds a 2 x 4 grid:

* a vertical cut line runs down every interior column boundary, inset from
  the top and bottom edges;
* every receipt except the last of its column is followed by a horizontal cut
  line spanning its column, drawn at the cursor's y after the block;
* when a column is full the cursor jumps to the top of the next one;
* when the page is full and another member follows, a new page is started,
  the cursor returns to the top-left and the vertical lines are redrawn.

The final page is saved as-is even when partially filled.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ..config.schema import LayoutSettings
from ..models import Member
from ..utils.errors import LayoutOverflowError
from ..utils.logging import get_logger
from .block import LINE_GAPS, receipt_lines
from .surface import Surface

__all__ = ["Cursor", "PageState", "ReceiptLayoutEngine"]

log = get_logger(__name__)

# The logo sits this far below the bottom margin line of its block.
_LOGO_DROP = 1.0


@dataclass
class Cursor:
    """Position where the next receipt block begins."""

    x: float
    y: float


@dataclass
class PageState:
    """Page bookkeeping for one document run."""

    number: int = 1
    placed: int = 0


class ReceiptLayoutEngine:
    """Place receipt blocks for a member sequence onto a :class:`Surface`."""

    def __init__(
        self,
        layout: LayoutSettings,
        surface: Surface,
        logo_path: str | os.PathLike[str] | None = None,
    ) -> None:
        self.layout = layout
        self.surface = surface
        self.logo_path = Path(logo_path) if logo_path is not None else None

    # ------------------------------------------------------------------
    # Geometry helpers
    # ------------------------------------------------------------------

    def column_left(self, column: int) -> float:
        return column * self.layout.column_width

    def column_top(self, column: int) -> Cursor:
        return Cursor(self.column_left(column) + self.layout.margin, self.layout.page_height)

    def cut_span(self, column: int) -> tuple[float, float]:
        """Return the horizontal extent of a cut line in ``column``."""

        lay = self.layout
        left = self.column_left(column)
        right = left + lay.column_width
        if column == 0:
            left += lay.cut_inset
        if column == lay.columns - 1:
            right -= lay.cut_inset
        return left, right

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def _draw_vertical_cuts(self) -> None:
        lay = self.layout
        for column in range(1, lay.columns):
            x = self.column_left(column)
            self.surface.draw_line(x, lay.page_height - lay.cut_inset, x, lay.cut_inset)

    def draw_receipt(self, member: Member, period: str, cursor: Cursor) -> None:
        """Draw one receipt block at ``cursor`` and move it below the block."""

        lay = self.layout
        if cursor.y - lay.block_height < -1e-9:
            raise LayoutOverflowError(
                f"receipt at y={cursor.y:.2f} mm does not fit above the page bottom"
            )
        x = cursor.x
        y = cursor.y - lay.margin - (lay.margin / 2.0)
        for text, gap in zip(receipt_lines(member, period), LINE_GAPS):
            self.surface.place_text(text, x, y)
            if gap:
                y -= gap * lay.line_offset
        y -= lay.margin
        cursor.y = y

        if self.logo_path is not None:
            self.surface.place_image(
                self.logo_path,
                cursor.x + lay.logo_offset_x,
                cursor.y + lay.margin - _LOGO_DROP,
                lay.logo_scale,
            )

    def render(self, period: str, members: Iterable[Member]) -> int:
        """Lay out every member, save the surface and return the page count."""

        lay = self.layout
        rows = lay.rows_per_column
        page = PageState()
        cursor = self.column_top(0)
        self._draw_vertical_cuts()

        for member in members:
            if page.placed == lay.receipts_per_page:
                self.surface.new_page()
                page = PageState(number=page.number + 1)
                cursor = self.column_top(0)
                self._draw_vertical_cuts()
                log.debug("started page %d", page.number)

            self.draw_receipt(member, period, cursor)
            page.placed += 1

            column, row = divmod(page.placed - 1, rows)
            if row == rows - 1:
                if column < lay.columns - 1:
                    cursor = self.column_top(column + 1)
            else:
                left, right = self.cut_span(column)
                self.surface.draw_line(left, cursor.y, right, cursor.y)

        log.debug("laid out %d page(s)", page.number)
        self.surface.save()
        return page.number
