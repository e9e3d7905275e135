"""A repository that keeps its coats in a text file, one per line."""

from __future__ import annotations

import os
from pathlib import Path

from .domain import Coat
from .repository import Repository


class FileRepository(Repository):
    """A :class:`Repository` that loads from and saves to a file.

    Every change is written back to the file straight away.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__()
        self.path = Path(path)
        self._load()

    def _load(self) -> None:
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                lines = handle.read().splitlines()
        except FileNotFoundError:
            return
        for line in lines:
            try:
                self._coats.append(Coat.from_line(line))
            except ValueError:
                continue

    def _save(self) -> None:
        with self.path.open("w", encoding="utf-8", newline="") as handle:
            handle.writelines(f"{coat.to_line()}\n" for coat in self._coats)

    def add(self, size: str, color: str, price: int, quantity: int, photograph: str) -> None:
        """Append a new coat and save; raise RepositoryError if it exists."""
        super().add(size, color, price, quantity, photograph)
        self._save()

    def delete(self, size: str, color: str, photograph: str) -> None:
        """Remove the matching coat and save."""
        super().delete(size, color, photograph)
        self._save()

    def delete_sold_out(self, size: str, color: str, photograph: str) -> None:
        """Remove the matching coat if it is sold out, then save."""
        super().delete_sold_out(size, color, photograph)
        self._save()

    def update_price(self, size: str, color: str, photograph: str, price: int) -> None:
        """Set a new price on the matching coat and save."""
        super().update_price(size, color, photograph, price)
        self._save()

    def update_quantity(self, size: str, color: str, photograph: str, quantity: int) -> None:
        """Set a new quantity on the matching coat and save."""
        super().update_quantity(size, color, photograph, quantity)
        self._save()