from __future__ import annotations

from enum import Enum


class Parity(Enum):
    """Odd/even academic week."""

    ODD = "odd"
    EVEN = "even"

    def flip(self) -> "Parity":
        return Parity.EVEN if self is Parity.ODD else Parity.ODD

    @property
    def label(self) -> str:
        """Persian label shown to users."""
        return "فرد" if self is Parity.ODD else "زوج"

    @property
    def emoji(self) -> str:
        return "🟣" if self is Parity.ODD else "🟢"

    @classmethod
    def from_text(cls, text: str) -> "Parity":
        """Accept ``odd``/``even`` as well as the Persian labels.

        Raises:
            ValueError: if the text names neither parity
        """
        value = (text or "").strip().lower()
        if value in ("odd", "فرد"):
            return cls.ODD
        if value in ("even", "زوج"):
            return cls.EVEN
        raise ValueError(f"Unknown week parity: {text!r}")
