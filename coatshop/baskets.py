"""Shopping baskets that save their content as CSV or HTML and open it."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable
from pathlib import Path

from .domain import Coat


class ShoppingBasket:
    """A basket of bought coats that can be saved to a file and opened."""

    default_filename = "ShoppingBasket.txt"

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path is not None else Path(self.default_filename)
        self.coats: list[Coat] = []

    def set_data(self, coats: Iterable[Coat]) -> None:
        """Replace the basket's content."""
        self.coats = list(coats)

    def render(self) -> str:
        """Return the file content for the current coats."""
        raise NotImplementedError

    def write(self) -> None:
        """Save the rendered basket to its file."""
        with self.path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(self.render())

    def open(self) -> None:
        """Open the saved file with the system's default application."""
        target = str(self.path)
        if sys.platform == "win32":
            os.startfile(target)  # type: ignore[attr-defined]
        elif sys.platform == "darwin":
            subprocess.Popen(["open", target])
        else:
            subprocess.Popen(["xdg-open", target])


class CSVShoppingBasket(ShoppingBasket):
    """A basket saved as comma-separated lines."""

    default_filename = "ShoppingBasket.csv"

    def render(self) -> str:
        return "".join(
            f"{c.size},{c.color},{c.price},{c.quantity},{c.photograph}\n" for c in self.coats
        )

    def write(self) -> None:
        """Save the basket and then empty it."""
        super().write()
        self.coats.clear()


class HTMLShoppingBasket(ShoppingBasket):
    """A basket saved as an HTML table."""

    default_filename = "ShoppingBasket.html"

    def render(self) -> str:
        parts = [
            "<!DOCTYPE html>\n",
            "<html>\n",
            "<head>\n",
            "\t<title>ShoppingBasket</title>\n",
            "</head>\n",
            "<body>\n",
            '<table border="1">\n',
            "\t<tr>\n",
            "\t\t<td><strong>SIZE</strong></td>\n",
            "\t\t<td><strong>COLOR</strong></td>\n",
            "\t\t<td><strong>PRICE</strong></td>\n",
            "\t\t<td><strong>QUANTITY</strong></td>\n",
            "\t\t<td><strong>PHOTOGRAPH</strong></td>\n",
            "\t</tr>\n",
        ]
        for coat in self.coats:
            parts.append("<tr>\n")
            for value in (coat.size, coat.color, coat.price, coat.quantity, coat.photograph):
                parts.append(f"\t<td>{value}</td>\n")
            parts.append("</tr>\n")
        parts.extend(["</table>\n", "</body>\n", "</html>\n"])
        return "".join(parts)