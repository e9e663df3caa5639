"""Core data model shared by extraction and layout."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Member:
    """One payee's receipt data.

    ``payment`` keeps the fee as text with the currency symbol and spaces
    removed; no arithmetic is performed on it.
    """

    first_name: str
    last_name: str
    payment: str

    @property
    def display_name(self) -> str:
        """Return ``"<last> <first>"`` as printed on the receipt."""

        return f"{self.last_name} {self.first_name}"


__all__ = ["Member"]
