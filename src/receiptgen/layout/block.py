"""Text content of a single receipt block."""

from __future__ import annotations

from ..models import Member

TITLE = "Mutual Fund"

# Line offsets to advance after each line; the last line is followed by the
# page margin instead.
LINE_GAPS: tuple[int, ...] = (2, 1, 1, 2, 1, 0)


def receipt_lines(member: Member, period: str) -> list[str]:
    """Return the six text lines printed for ``member``."""

    return [
        TITLE,
        f"Period: {period}",
        f"Name: {member.display_name}",
        f"Payment: ${member.payment}",
        "Date:",
        "Signature:",
    ]


__all__ = ["LINE_GAPS", "TITLE", "receipt_lines"]
