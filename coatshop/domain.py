"""The coat record and its one-line text form."""

from __future__ import annotations

from dataclasses import dataclass


def tokenize(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``; a trailing delimiter yields no empty token."""
    if not text:
        return []
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


@dataclass
class Coat:
    """A trench coat offered in the shop."""

    size: str
    color: str
    price: int
    quantity: int
    photograph: str

    def to_line(self) -> str:
        """Return the comma-separated form used in data files."""
        return f"{self.size},{self.color},{self.price},{self.quantity},{self.photograph}"

    @classmethod
    def from_line(cls, line: str) -> Coat:
        """Parse a line written by :meth:`to_line`.

        Raises ValueError if the line does not hold exactly five fields or
        the price or quantity is not an integer.
        """
        tokens = tokenize(line.rstrip("\r\n"), ",")
        if len(tokens) != 5:
            raise ValueError(f"expected 5 fields, got {len(tokens)}: {line!r}")
        size, color, price, quantity, photograph = tokens
        return cls(size, color, int(price), int(quantity), photograph)

    def key(self) -> tuple[str, str, str]:
        """The fields that identify a coat: size, color and photograph."""
        return (self.size, self.color, self.photograph)