"""Batch payment receipt generator.

Reads member payment records from a delimited text file and lays them out as
printable receipts, eight per letter page, separated by cut lines.  The
command line interface lives in :mod:`receiptgen.cli`.
"""

from .config import ConfigModel, load_config
from .layout.engine import ReceiptLayoutEngine
from .models import Member
from .records import extract_members, read_members

__version__ = "0.1.0"

__all__ = [
    "ConfigModel",
    "Member",
    "ReceiptLayoutEngine",
    "__version__",
    "extract_members",
    "load_config",
    "read_members",
]
