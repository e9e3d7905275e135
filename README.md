# coatshop

A small trench coat shop that runs in the terminal. An administrator keeps
the stock of coats. A customer browses the coats, buys them into a shopping
basket, and saves that basket as a CSV or HTML file.

## Installation

```
pip install .
```

## Running the shop

```
coatshop [DATA]
```

`DATA` is the stock file and defaults to `text.txt` in the current directory.
If the file does not exist, the shop starts with an empty stock. Each change
to the stock is written back to that file. The program ends when you type
`E` at the main prompt or when input runs out.

First you choose the basket format: `1` for CSV or `2` for HTML. After that
the main prompt switches between modes:

- `1` opens **administrator mode**:
  - `1` adds a coat.
  - `2` displays the stock.
  - `3` deletes a coat.
  - `4` deletes a coat that is sold out (quantity 0).
  - `5` updates a coat's price.
  - `6` updates a coat's quantity.
  - `H` shows the menu again.
  - `E` leaves the mode.
- `2` opens **user mode**:
  - `1` asks for a size (`XS`, `S`, `M`, `XL`, `XXL`, or an empty line for
    every size). You then walk through the coats with `Buy`, `Next` and
    `Pay`. Each coat's photograph link is opened in the web browser. When you
    finish, the basket file is written.
  - `2` displays the basket and its total price.
  - `3` writes the basket file and opens it with the system's default
    application.
  - `H` shows the menu again.
  - `E` leaves the mode.
- `E` exits the program.

The basket is written to `ShoppingBasket.csv` or `ShoppingBasket.html` in the
current directory. The basket itself lives only in memory and is empty each
time the program starts.

A coat is identified by its size, its color and the link to its photograph.
The rules for each field are:

- Sizes are `XXS`, `XS`, `S`, `M`, `L`, `XL` and `XXL`.
- A color must not contain digits.
- A price or quantity must be an integer and must not contain letters.
- A photograph link must start with `https://`, be at least 13 characters
  long, and contain `.com` or `.jpg`.

## Using it as a library

```python
from coatshop.baskets import CSVShoppingBasket
from coatshop.domain import Coat
from coatshop.repository import Repository
from coatshop.service import Service

stock = Repository()
stock.seed()                      # ten sample coats
service = Service(stock, Repository())

coat = service.filtered("M")[0]   # "All sizes" returns everything
service.update_quantity(coat.size, coat.color, coat.photograph, coat.quantity - 1)
service.add_to_basket(
    stock.get(coat.size, coat.color, coat.photograph),
    Coat(coat.size, coat.color, coat.price, 1, coat.photograph),
)

basket = CSVShoppingBasket("basket.csv")
basket.set_data(service.user_coats())
basket.write()
print(service.total_price())
```

The modules are:

- `coatshop.domain`:
  - `Coat` is a dataclass of `size`, `color`, `price`, `quantity` and
    `photograph`.
  - `to_line()` and `Coat.from_line()` convert a coat to and from one
    comma-separated line.
  - `key()` returns the identifying fields.
- `coatshop.repository`: `Repository` is an in-memory store. It provides
  `add`, `get`, `find`, `delete`, `delete_sold_out`, `update_price`,
  `update_quantity`, `coats` and `seed`, and it supports `len()` and
  iteration.
- `coatshop.file_repository`: `FileRepository(path)` works like `Repository`.
  It reads a file with one `size,color,price,quantity,photograph` line per
  coat and skips malformed lines. It writes the file back after every change.
- `coatshop.service`: `Service(repository, user_repository)` works on the
  stock and the basket:
  - `add_to_basket` adds the bought coat to the basket and adds its price to
    `total_price()`. If the stock coat's quantity is 0, it removes that coat
    from the stock and returns `True`.
- `coatshop.baskets`: `CSVShoppingBasket` and `HTMLShoppingBasket` provide
  `set_data`, `render`, `write` and `open`. After a CSV basket is written, it
  is emptied.
- `coatshop.validation`: `validate_color`, `validate_size`,
  `validate_photograph`, `validate_price` and `validate_quantity`. The last
  two return the integer or raise `ValidationError`.
- `coatshop.console`: `Console(service, stdin, stdout)` and `main(argv=None)`.

Errors are subclasses of `coatshop.errors.ShopError`. The package defines
three of them: `ValidationError`, `RepositoryError` and `ServiceError`.

## What it does not do

- The shop runs only as a text console. There is no graphical window and no
  chart of the stock.
- There is no undo or redo of changes to the stock or the basket.