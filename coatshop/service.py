"""Operations of the shop on its stock and on the customer's basket."""

from __future__ import annotations

from .domain import Coat
from .repository import Repository

ALL_SIZES = "All sizes"


class Service:
    """Works on the shop's stock and on the user's basket."""

    def __init__(self, repository: Repository, user_repository: Repository) -> None:
        self.repository = repository
        self.user_repository = user_repository
        self._total_price = 0

    def coats(self) -> list[Coat]:
        """All coats in stock."""
        return self.repository.coats()

    def user_coats(self) -> list[Coat]:
        """All coats in the user's basket."""
        return self.user_repository.coats()

    def size(self) -> int:
        """Number of coats in stock."""
        return len(self.repository)

    def total_price(self) -> int:
        """Sum of the prices of everything put in the basket."""
        return self._total_price

    def add(self, size: str, color: str, price: int, quantity: int, photograph: str) -> None:
        """Add a coat to the stock."""
        self.repository.add(size, color, price, quantity, photograph)

    def delete(self, size: str, color: str, photograph: str, sold_out: bool = False) -> None:
        """Remove a coat from stock; with ``sold_out`` only if its quantity is zero."""
        self.repository.get(size, color, photograph)
        if sold_out:
            self.repository.delete_sold_out(size, color, photograph)
        else:
            self.repository.delete(size, color, photograph)

    def update_price(self, size: str, color: str, photograph: str, price: int) -> None:
        """Set a new price on a coat in stock."""
        self.repository.update_price(size, color, photograph, price)

    def update_quantity(self, size: str, color: str, photograph: str, quantity: int) -> None:
        """Set a new quantity on a coat in stock."""
        self.repository.update_quantity(size, color, photograph, quantity)

    def add_to_basket(self, coat: Coat, bought: Coat) -> bool:
        """Put ``bought`` in the basket and charge its price.

        ``coat`` is the stock coat as it stands after the purchase. If its
        quantity is zero it is removed from stock and True is returned.
        """
        key = bought.key()
        if self.user_repository.find(*key) is None:
            self.user_repository.add(
                bought.size, bought.color, bought.price, bought.quantity, coat.photograph
            )
        else:
            held = self.user_repository.get(*key)
            self.user_repository.update_quantity(
                bought.size, bought.color, bought.photograph, held.quantity + 1
            )
        self._total_price += bought.price
        if coat.quantity == 0:
            self.repository.delete_sold_out(coat.size, coat.color, coat.photograph)
            return True
        return False

    def filtered(self, size: str) -> list[Coat]:
        """Coats in stock of the given size, or all of them for ``"All sizes"``."""
        if size == ALL_SIZES:
            return self.coats()
        return [coat for coat in self.repository if coat.size == size]