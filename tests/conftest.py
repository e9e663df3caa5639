from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from receiptgen.config import ConfigModel, load_config
from receiptgen.models import Member

HEADER = "First Name,Last Name,Fee"

ROWS = [
    "Jane,Doe,$ 50",
    "John,Smith,$120",
    "Ana,Lopez,$ 1,234",
    "Li,Wei,$ 75",
    "Omar,Haddad,$ 20",
    "Eva,Novak,$ 300",
]


@pytest.fixture
def cfg() -> ConfigModel:
    return load_config()


@pytest.fixture
def write_member_file(tmp_path: Path) -> Callable[..., Path]:
    """Write a member file with two preamble lines before the header."""

    def _write(
        rows: Sequence[str] = ROWS,
        header: str = HEADER,
        name: str = "members.csv",
    ) -> Path:
        lines = ["Club Payments", "Exported list", header, *rows]
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_members() -> Callable[[int], list[Member]]:
    def _make(count: int) -> list[Member]:
        return [Member(f"First{i}", f"Last{i}", str(10 * i)) for i in range(1, count + 1)]

    return _make
