"""Receipt layout: block composition, placement and drawing surfaces."""

from .engine import Cursor, PageState, ReceiptLayoutEngine
from .surface import RecordingSurface, Surface

__all__ = ["Cursor", "PageState", "ReceiptLayoutEngine", "RecordingSurface", "Surface"]
