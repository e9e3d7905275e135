"""In-memory store of coats, keyed by size, color and photograph."""

from __future__ import annotations

from collections.abc import Iterator

from .domain import Coat
from .errors import RepositoryError

_MISSING = "The given product doesn't exist!"

_SEED = (
    ("M", "Blue", 100, 10, "https://images.example.com/blue-coat.jpg"),
    ("L", "Red", 150, 5, "https://images.example.com/red-coat.jpg"),
    ("S", "Pink", 200, 3, "https://images.example.com/pink-coat.jpg"),
    ("S", "Yellow", 175, 10, "https://images.example.com/yellow-coat.jpg"),
    ("M", "Orange", 242, 2, "https://images.example.com/orange-coat.jpg"),
    ("L", "Black", 305, 2, "https://images.example.com/black-coat.jpg"),
    ("XL", "Grey", 100, 4, "https://images.example.com/grey-coat.jpg"),
    ("XS", "Magenta", 400, 1, "https://images.example.com/magenta-coat.jpg"),
    ("XS", "Green", 135, 3, "https://images.example.com/green-coat.jpg"),
    ("XL", "Purple", 243, 10, "https://images.example.com/purple-coat.jpg"),
)


class Repository:
    """An ordered collection of coats with no two sharing the same key."""

    def __init__(self) -> None:
        self._coats: list[Coat] = []

    def __len__(self) -> int:
        return len(self._coats)

    def __iter__(self) -> Iterator[Coat]:
        return iter(list(self._coats))

    def coats(self) -> list[Coat]:
        """All coats, in insertion order."""
        return list(self._coats)

    def find(self, size: str, color: str, photograph: str) -> int | None:
        """Return the position of the matching coat, or None."""
        key = (size, color, photograph)
        return next(
            (pos for pos, coat in enumerate(self._coats) if coat.key() == key),
            None,
        )

    def _position(self, size: str, color: str, photograph: str, message: str = _MISSING) -> int:
        pos = self.find(size, color, photograph)
        if pos is None:
            raise RepositoryError(message)
        return pos

    def get(self, size: str, color: str, photograph: str) -> Coat:
        """Return a copy of the matching coat; raise RepositoryError if absent."""
        coat = self._coats[self._position(size, color, photograph)]
        return Coat(coat.size, coat.color, coat.price, coat.quantity, coat.photograph)

    def add(self, size: str, color: str, price: int, quantity: int, photograph: str) -> None:
        """Append a new coat; raise RepositoryError if it already exists."""
        if self.find(size, color, photograph) is not None:
            raise RepositoryError("The given product already exists!")
        self._coats.append(Coat(size, color, price, quantity, photograph))

    def delete(self, size: str, color: str, photograph: str) -> None:
        """Remove the matching coat; raise RepositoryError if absent."""
        del self._coats[self._position(size, color, photograph)]

    def delete_sold_out(self, size: str, color: str, photograph: str) -> None:
        """Remove the matching coat if its quantity is zero."""
        message = "The given product isn't sold out or it doesn't exist!"
        pos = self._position(size, color, photograph, message)
        if self._coats[pos].quantity != 0:
            raise RepositoryError(message)
        del self._coats[pos]

    def update_price(self, size: str, color: str, photograph: str, price: int) -> None:
        """Set a new price on the matching coat."""
        pos = self._position(size, color, photograph)
        old = self._coats[pos]
        self._coats[pos] = Coat(size, color, price, old.quantity, photograph)

    def update_quantity(self, size: str, color: str, photograph: str, quantity: int) -> None:
        """Set a new quantity on the matching coat."""
        pos = self._position(size, color, photograph)
        old = self._coats[pos]
        self._coats[pos] = Coat(size, color, old.price, quantity, photograph)

    def seed(self) -> None:
        """Fill the repository with a starting stock of ten coats."""
        for size, color, price, quantity, photograph in _SEED:
            self.add(size, color, price, quantity, photograph)