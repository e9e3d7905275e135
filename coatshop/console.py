"""Text menus for the shop: an administrator mode and a user mode."""

from __future__ import annotations

import argparse
import re
import sys
import webbrowser
from collections.abc import Callable
from dataclasses import replace
from enum import Enum
from typing import TextIO

from .baskets import CSVShoppingBasket, HTMLShoppingBasket, ShoppingBasket
from .domain import Coat
from .errors import RepositoryError, ValidationError
from .file_repository import FileRepository
from .repository import Repository
from .service import Service
from .validation import (
    validate_color,
    validate_photograph,
    validate_price,
    validate_quantity,
    validate_size,
)

_ADMIN_MENU = (
    "Type 1 for adding a product!\n"
    "Type 2 for displaying the products!\n"
    "Type 3 for deleting a product!\n"
    "Type 4 for deleting a sold out product!\n"
    "Type 5 for updating the price of a product!\n"
    "Type 6 for updating the quantity of a product!\n"
    "Type H for displaying the menu!\n"
    "Type E in order to exit the program!\n"
)

_USER_MENU = (
    "Type 1 for buying products!\n"
    "Type 2 for displaying the shopping basket!\n"
    "Type 3 for opening the application!\n"
    "Type E for exit!\n"
)

_BROWSE_PROMPT = "Buy, go Next or go Pay\n"
_BROWSE_COMMANDS = ("Buy", "Next", "Pay")
_SHOP_SIZES = ("S", "M", "XS", "XL", "XXL", "")
_INVALID_INPUT = "Invalid input!"


class BrowseResult(Enum):
    """How a walk through the products ended."""

    WRAPPED = "wrapped"
    PAID = "paid"
    OUT_OF_STOCK = "out_of_stock"
    NO_MATCH = "no_match"


class _Input:
    """Reads whitespace-separated words and whole lines from a text stream."""

    _WORD = re.compile(r"\s*(\S+)")

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._buffer = ""

    def _fill(self) -> None:
        line = self._stream.readline()
        if not line:
            raise EOFError("end of input")
        self._buffer += line

    def word(self) -> str:
        while not self._buffer.strip():
            self._buffer = ""
            self._fill()
        match = self._WORD.match(self._buffer)
        assert match is not None
        self._buffer = self._buffer[match.end():]
        return match.group(1)

    def ignore(self) -> None:
        if not self._buffer:
            self._fill()
        self._buffer = self._buffer[1:]

    def line(self) -> str:
        if not self._buffer:
            self._fill()
        text, _, self._buffer = self._buffer.partition("\n")
        return text


def _as_int(validator: Callable[[str], int], text: str) -> int | None:
    try:
        return validator(text)
    except ValidationError:
        return None


class Console:
    """Interactive menus reading commands from ``stdin`` and writing to ``stdout``."""

    def __init__(
        self,
        service: Service,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.service = service
        self._in = _Input(stdin if stdin is not None else sys.stdin)
        self._out = stdout if stdout is not None else sys.stdout
        self.basket: ShoppingBasket | None = CSVShoppingBasket()
        self.open_link: Callable[[str], object] = webbrowser.open

    def _say(self, text: str) -> None:
        self._out.write(text)

    # -- administrator mode -------------------------------------------------

    def _ask(self, prompt: str) -> str:
        self._say(prompt)
        return self._in.word()

    def _ask_key(self) -> tuple[str, str]:
        size = self._ask("Type in the size: ")
        color = self._ask("\nType in the color: ")
        return size, color

    def add_coat(self) -> None:
        """Read a new coat and add it to the stock."""
        size = self._ask("Type in the size: ")
        self._say("\nType in the color: ")
        self._in.ignore()
        color = self._in.line()
        price_text = self._ask("\nType in the price: ")
        quantity_text = self._ask("\nType in the quantity: ")
        photograph = self._ask("\nType in the photograph: ")
        price = _as_int(validate_price, price_text)
        quantity = _as_int(validate_quantity, quantity_text)
        if (
            not validate_color(color)
            or not validate_size(size)
            or price is None
            or quantity is None
            or not validate_photograph(photograph)
        ):
            raise ValidationError(_INVALID_INPUT)
        self.service.add(size, color, price, quantity, photograph)
        self._say("The product was added successfully!\n")

    def display_coats(self) -> None:
        """Print every coat in stock, numbered from 1."""
        for number, coat in enumerate(self.service.coats(), start=1):
            self._say(
                f"{number})  Size: {coat.size} Color: {coat.color} Price: {coat.price}"
                f" Quantity: {coat.quantity}\nLink Photo: {coat.photograph}\n\n"
            )

    def update_price(self) -> None:
        """Read a coat and its new price and update it."""
        size, color = self._ask_key()
        price_text = self._ask("\nType in the price: ")
        photograph = self._ask("\nType in the photograph: ")
        price = _as_int(validate_price, price_text)
        if (
            not validate_color(color)
            or not validate_size(size)
            or price is None
            or not validate_photograph(photograph)
        ):
            raise ValidationError(_INVALID_INPUT)
        self.service.update_price(size, color, photograph, price)
        self._say("The product was updated successfully!\n")

    def update_quantity(self) -> None:
        """Read a coat and its new quantity and update it."""
        size, color = self._ask_key()
        quantity_text = self._ask("\nType in the quantity: ")
        photograph = self._ask("\nType in the photograph: ")
        quantity = _as_int(validate_quantity, quantity_text)
        if (
            not validate_color(color)
            or not validate_size(size)
            or quantity is None
            or not validate_photograph(photograph)
        ):
            raise ValidationError(_INVALID_INPUT)
        self.service.update_quantity(size, color, photograph, quantity)
        self._say("The product was updated successfully!\n")

    def _delete(self, sold_out: bool) -> None:
        size, color = self._ask_key()
        photograph = self._ask("\nType in the photograph: ")
        if (
            not validate_color(color)
            or not validate_size(size)
            or not validate_photograph(photograph)
        ):
            raise ValidationError(_INVALID_INPUT)
        self.service.delete(size, color, photograph, sold_out)
        self._say("The product was deleted successfully!\n")

    def delete_coat(self) -> None:
        """Read a coat and remove it from stock."""
        self._delete(sold_out=False)

    def delete_sold_out(self) -> None:
        """Read a coat and remove it from stock if it is sold out."""
        self._delete(sold_out=True)

    def administrator_mode(self) -> None:
        """Run the administrator menu until the user types E."""
        actions: dict[str, Callable[[], None]] = {
            "1": self.add_coat,
            "2": self.display_coats,
            "3": self.delete_coat,
            "4": self.delete_sold_out,
            "5": self.update_price,
            "6": self.update_quantity,
            "H": lambda: self._say(_ADMIN_MENU),
        }
        self._say(_ADMIN_MENU)
        while True:
            try:
                self._say("\nCommand> ")
                command = self._in.word()
                if command == "E":
                    return
                action = actions.get(command)
                if action is None:
                    self._say("Invalid command!\n")
                else:
                    action()
            except (ValidationError, RepositoryError) as error:
                self._say(str(error))

    # -- user mode ----------------------------------------------------------

    def _show(self, coat: Coat) -> None:
        self._say(
            f"Size: {coat.size} Color: {coat.color} Price: {coat.price}"
            f" Quantity: {coat.quantity}\nLink Photo: {coat.photograph}\n\n"
        )
        self.open_link(coat.photograph)
        self._say(_BROWSE_PROMPT)

    def _browse_command(self) -> str | None:
        self._say("\nCommand> ")
        command = self._in.word()
        if command not in _BROWSE_COMMANDS:
            self._say("Invalid command!")
            return None
        return command

    def browse(self) -> BrowseResult:
        """Walk through every coat in stock, buying on request."""
        position = 0
        if self.service.size() == 0:
            return BrowseResult.OUT_OF_STOCK
        self._show(self.service.coats()[position])
        while position < self.service.size():
            command = self._browse_command()
            if command == "Buy":
                coat = self.service.coats()[position]
                self.service.update_quantity(
                    coat.size, coat.color, coat.photograph, coat.quantity - 1
                )
                bought = Coat(coat.size, coat.color, coat.price, 1, coat.photograph)
                if self.service.add_to_basket(self.service.coats()[position], bought):
                    self._say(_BROWSE_PROMPT)
            elif command == "Next":
                position += 1
                if position >= self.service.size():
                    return BrowseResult.WRAPPED
                self._show(self.service.coats()[position])
            elif command == "Pay":
                return BrowseResult.PAID
        return BrowseResult.OUT_OF_STOCK

    def browse_by_size(self, size: str) -> BrowseResult:
        """Walk through the coats of one size, buying on request."""
        coats = [replace(coat) for coat in self.service.coats() if coat.size == size]
        if not coats:
            return BrowseResult.NO_MATCH
        position = 0
        self._show(coats[position])
        while position < len(coats):
            command = self._browse_command()
            if command == "Buy":
                coat = coats[position]
                new_quantity = coat.quantity - 1
                self.service.update_quantity(
                    coat.size, coat.color, coat.photograph, new_quantity
                )
                coat.quantity = new_quantity
                bought = Coat(coat.size, coat.color, coat.price, 1, coat.photograph)
                if self.service.add_to_basket(coat, bought):
                    del coats[position]
                self._say(_BROWSE_PROMPT)
            elif command == "Next":
                position += 1
                if position >= len(coats):
                    return BrowseResult.WRAPPED
                self._show(coats[position])
            elif command == "Pay":
                return BrowseResult.PAID
        return BrowseResult.OUT_OF_STOCK

    def _require_basket(self) -> ShoppingBasket:
        if self.basket is None:
            raise RepositoryError("No shopping basket file type was chosen!")
        return self.basket

    def _save_basket(self) -> ShoppingBasket:
        basket = self._require_basket()
        basket.set_data(self.service.user_coats())
        basket.write()
        return basket

    def shop(self) -> None:
        """Ask for a size, let the user buy, then save the basket."""
        if self.service.size() == 0:
            self._say("There are no products on stock!")
        else:
            self._say("Type in the size: ")
            self._in.ignore()
            size = self._in.line()
            if size not in _SHOP_SIZES:
                self._say("Invalid size!")
            else:
                result = BrowseResult.WRAPPED
                while result is BrowseResult.WRAPPED:
                    result = self.browse() if not size else self.browse_by_size(size)
                if result is BrowseResult.OUT_OF_STOCK:
                    raise RepositoryError("There are no products left on stock!")
                if result is BrowseResult.NO_MATCH:
                    raise RepositoryError("There are no products with the given size!")
        self._save_basket()

    def display_basket(self) -> None:
        """Print the basket and the total price."""
        for number, coat in enumerate(self.service.user_coats(), start=1):
            self._say(
                f"{number})  Size: {coat.size} Color: {coat.color} Price: {coat.price}"
                f" Quantity: {coat.quantity}\nLink Photo: {coat.photograph}\n\n"
            )
        self._say(f"Total price of the items: {self.service.total_price()}\n")

    def open_application(self) -> None:
        """Save the basket and open the saved file."""
        self._save_basket().open()

    def user_mode(self) -> None:
        """Run the user menu until the user types E."""
        actions: dict[str, Callable[[], None]] = {
            "1": self.shop,
            "2": self.display_basket,
            "3": self.open_application,
            "H": lambda: self._say(_USER_MENU),
        }
        while True:
            try:
                self._say("\n")
                self._say(_USER_MENU)
                self._say("\n")
                command = self._in.word()
                if command == "E":
                    return
                action = actions.get(command)
                if action is None:
                    self._say("Invalid command!\n")
                else:
                    action()
            except RepositoryError as error:
                self._say(str(error))

    def start(self) -> None:
        """Choose the basket file type, then switch between the two modes."""
        while True:
            file_type = self._ask("Type 1 for CSV file or type 2 for HTML file: ")
            if file_type == "1":
                self.basket = CSVShoppingBasket()
                break
            if file_type == "2":
                self.basket = HTMLShoppingBasket()
                break
            self._say("Invalid file type!")
        while True:
            try:
                command = self._ask("Type 1 for Administrator Mode or type 2 for User Mode:  ")
                self._say("\n")
                if command == "1":
                    self.administrator_mode()
                elif command == "2":
                    self.user_mode()
                elif command == "E":
                    self.basket = None
                    return
                else:
                    self._say("Invalid command!\n")
            except ValidationError:
                pass


def main(argv: list[str] | None = None) -> int:
    """Run the shop on the console with the stock kept in a data file."""
    parser = argparse.ArgumentParser(description="Trench coat shop.")
    parser.add_argument("data", nargs="?", default="text.txt", help="stock file")
    args = parser.parse_args(argv)
    service = Service(FileRepository(args.data), Repository())
    console = Console(service, sys.stdin, sys.stdout)
    try:
        console.start()
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())