import io
import sys

import pytest

from coatshop.baskets import CSVShoppingBasket
from coatshop.console import BrowseResult, Console, main
from coatshop.domain import Coat
from coatshop.repository import Repository
from coatshop.service import Service

PHOTO_A = "https://shop.example.com/a.jpg"
PHOTO_B = "https://shop.example.com/b.jpg"


class RecordingBasket(CSVShoppingBasket):
    def __init__(self, path):
        super().__init__(path)
        self.opened = 0

    def open(self):
        self.opened += 1


def make_console(text, coats=(), tmp_path=None):
    stock = Repository()
    for coat in coats:
        stock.add(*coat)
    service = Service(stock, Repository())
    out = io.StringIO()
    console = Console(service, io.StringIO(text), out)
    links = []
    console.open_link = links.append
    if tmp_path is not None:
        console.basket = CSVShoppingBasket(tmp_path / "basket.csv")
    return console, service, out, links


def test_add_coat_reads_color_with_spaces():
    text = f"1\nM\nDark Blue\n100\n5\n{PHOTO_A}\nE\n"
    console, service, out, _ = make_console(text)
    console.administrator_mode()
    assert service.coats() == [Coat("M", "Dark Blue", 100, 5, PHOTO_A)]
    assert "The product was added successfully!" in out.getvalue()


def test_add_coat_with_invalid_price_reports_invalid_input():
    text = f"1\nM\nBlue\nabc\n5\n{PHOTO_A}\nE\n"
    console, service, out, _ = make_console(text)
    console.administrator_mode()
    assert service.coats() == []
    assert "Invalid input!" in out.getvalue()


def test_add_duplicate_reports_repository_error():
    text = f"1\nM\nBlue\n100\n5\n{PHOTO_A}\nE\n"
    console, service, out, _ = make_console(text, [("M", "Blue", 100, 5, PHOTO_A)])
    console.administrator_mode()
    assert "The given product already exists!" in out.getvalue()
    assert len(service.coats()) == 1


def test_invalid_admin_command():
    console, _, out, _ = make_console("7\nE\n")
    console.administrator_mode()
    assert "Invalid command!\n" in out.getvalue()


def test_display_coats_format():
    console, _, out, _ = make_console("2\nE\n", [("M", "Blue", 100, 5, PHOTO_A)])
    console.administrator_mode()
    expected = f"1)  Size: M Color: Blue Price: 100 Quantity: 5\nLink Photo: {PHOTO_A}\n\n"
    assert expected in out.getvalue()


def test_update_price_and_quantity():
    text = f"5\nM\nBlue\n300\n{PHOTO_A}\n6\nM\nBlue\n9\n{PHOTO_A}\nE\n"
    console, service, out, _ = make_console(text, [("M", "Blue", 100, 5, PHOTO_A)])
    console.administrator_mode()
    assert service.coats() == [Coat("M", "Blue", 300, 9, PHOTO_A)]
    assert out.getvalue().count("The product was updated successfully!") == 2


def test_delete_and_delete_sold_out():
    text = f"4\nM\nBlue\n{PHOTO_A}\n3\nM\nBlue\n{PHOTO_A}\nE\n"
    console, service, out, _ = make_console(text, [("M", "Blue", 100, 5, PHOTO_A)])
    console.administrator_mode()
    output = out.getvalue()
    assert "The given product isn't sold out or it doesn't exist!" in output
    assert "The product was deleted successfully!" in output
    assert service.coats() == []


def test_buy_then_pay_writes_basket(tmp_path):
    console, service, out, links = make_console(
        "1\n\nBuy\nPay\nE\n", [("M", "Blue", 100, 2, PHOTO_A)], tmp_path
    )
    console.user_mode()
    assert service.coats() == [Coat("M", "Blue", 100, 1, PHOTO_A)]
    assert service.user_coats() == [Coat("M", "Blue", 100, 1, PHOTO_A)]
    assert service.total_price() == 100
    assert links == [PHOTO_A]
    content = (tmp_path / "basket.csv").read_text(encoding="utf-8")
    assert content == Coat("M", "Blue", 100, 1, PHOTO_A).to_line() + "\n"


def test_buying_last_unit_runs_out_of_stock(tmp_path):
    console, service, out, _ = make_console(
        "1\n\nBuy\nE\n", [("M", "Blue", 100, 1, PHOTO_A)], tmp_path
    )
    console.user_mode()
    assert "There are no products left on stock!" in out.getvalue()
    assert service.coats() == []
    assert service.user_coats() == [Coat("M", "Blue", 100, 1, PHOTO_A)]


def test_buy_by_size_last_unit(tmp_path):
    console, service, out, _ = make_console(
        "1\nM\nBuy\nE\n", [("M", "Blue", 100, 1, PHOTO_A)], tmp_path
    )
    console.user_mode()
    assert "There are no products left on stock!" in out.getvalue()
    assert service.coats() == []


def test_size_without_products(tmp_path):
    console, _, out, _ = make_console(
        "1\nXS\nE\n", [("M", "Blue", 100, 1, PHOTO_A)], tmp_path
    )
    console.user_mode()
    assert "There are no products with the given size!" in out.getvalue()


def test_size_not_offered_in_shop(tmp_path):
    console, _, out, _ = make_console(
        "1\nL\nE\n", [("L", "Blue", 100, 1, PHOTO_A)], tmp_path
    )
    console.user_mode()
    assert "Invalid size!" in out.getvalue()


def test_next_wraps_around(tmp_path):
    coats = [("M", "Blue", 100, 1, PHOTO_A), ("S", "Pink", 200, 3, PHOTO_B)]
    console, service, _, links = make_console("1\n\nNext\nNext\nPay\nE\n", coats, tmp_path)
    console.user_mode()
    assert links == [PHOTO_A, PHOTO_B, PHOTO_A]
    assert service.user_coats() == []


def test_browse_returns_paid_and_wrapped():
    coats = [("M", "Blue", 100, 1, PHOTO_A)]
    console, _, _, _ = make_console("Pay\nNext\n", coats)
    assert console.browse() is BrowseResult.PAID
    assert console.browse_by_size("M") is BrowseResult.WRAPPED
    assert console.browse_by_size("XS") is BrowseResult.NO_MATCH


def test_display_basket_shows_total():
    coats = [("M", "Blue", 100, 3, PHOTO_A)]
    console, service, out, _ = make_console("", coats)
    service.add_to_basket(Coat("M", "Blue", 100, 2, PHOTO_A), Coat("M", "Blue", 100, 1, PHOTO_A))
    console.display_basket()
    output = out.getvalue()
    assert f"1)  Size: M Color: Blue Price: 100 Quantity: 1\nLink Photo: {PHOTO_A}\n\n" in output
    assert output.endswith("Total price of the items: 100\n")


def test_open_application_writes_and_opens(tmp_path):
    console, service, _, _ = make_console("", [("M", "Blue", 100, 3, PHOTO_A)])
    basket = RecordingBasket(tmp_path / "basket.csv")
    console.basket = basket
    service.add_to_basket(Coat("M", "Blue", 100, 2, PHOTO_A), Coat("M", "Blue", 100, 1, PHOTO_A))
    console.open_application()
    assert basket.opened == 1
    assert (tmp_path / "basket.csv").read_text(encoding="utf-8") == (
        Coat("M", "Blue", 100, 1, PHOTO_A).to_line() + "\n"
    )


def test_start_rejects_bad_file_type_then_exits():
    console, _, out, _ = make_console("3\n1\n9\nE\n")
    console.start()
    output = out.getvalue()
    assert "Invalid file type!" in output
    assert "Invalid command!\n" in output
    assert console.basket is None


def test_main_persists_added_coat(tmp_path, monkeypatch, capsys):
    data = tmp_path / "stock.txt"
    text = f"1\n1\n1\nM\nBlue\n100\n5\n{PHOTO_A}\nE\nE\n"
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    assert main([str(data)]) == 0
    assert data.read_text(encoding="utf-8") == f"M,Blue,100,5,{PHOTO_A}\n"
    assert "The product was added successfully!" in capsys.readouterr().out


@pytest.mark.parametrize("text", ["", "1\n"])
def test_main_stops_at_end_of_input(tmp_path, monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    assert main([str(tmp_path / "stock.txt")]) == 0