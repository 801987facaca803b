# bookstorepp

A small bookstore kept in plain text files. It gives you two commands:

- `bookstore-admin` manages the stock and lets you view past orders.
- `bookstore-cart` manages a shopping cart and turns it into a purchase.

Both commands work on files under `data/` in the current directory:

| File              | Contents                                  |
|-------------------|-------------------------------------------|
| `data/stock.txt`  | product count, then one product per line  |
| `data/cart.txt`   | one `barcode quantity` pair per line      |
| `data/orders.txt` | orders appended after each purchase       |

A stock line reads `barcode name author quantity price`. If the stock file is
missing when the admin command runs, or when an item is added to the cart, it
is created with three sample books (barcodes `111`, `112` and `113`).

## Installation

```
pip install .
```

## Administering stock

```
bookstore-admin view_stock_products
bookstore-admin add_product 114 Refactoring Fowler 6 47.25
bookstore-admin modify_product price 114 44.00
bookstore-admin modify_product quantity 114 12
bookstore-admin delete_product 114
bookstore-admin view_orders
```

- `view_stock_products` lists every product as
  `barcode | name | author | quantity | price`, or says there are none.
- `add_product` takes barcode, name, author, quantity and price. Quantity and
  price must not be negative.
- `modify_product` takes a field, a barcode and a new value. Only the fields
  `price` and `quantity` are accepted; every product with that barcode is
  changed.
- `delete_product` removes every product with that barcode.
- `view_orders` prints the orders file, or says no orders were found.

Names and authors are single words, because the stock file separates fields
with whitespace. Prices are written in their shortest form, so `44.00` is
stored as `44`.

## Using the cart

```
bookstore-cart add_product 111 2
bookstore-cart view_cart
bookstore-cart modify_product 111 3
bookstore-cart delete_product 111
bookstore-cart purchase
```

- `add_product` needs a positive quantity and a barcode that exists in stock.
  Adding a barcode already in the cart increases its quantity.
- `modify_product` sets the quantity of an item already in the cart; setting
  it to `0` removes the item. Negative quantities are refused.
- `delete_product` removes an item from the cart.
- `purchase` checks that every item is in stock in sufficient quantity,
  deducts the quantities from stock, appends the order to `data/orders.txt`
  (a line with today's date as `day month year`, then one `barcode quantity`
  line per item, then a blank line), and empties the cart. With an empty cart
  it says there is nothing to purchase.

Both commands exit with status 1 and print an error when no command is given,
the command is unknown, its arguments are wrong, or the operation fails.

## Using it as a library

```python
from bookstorepp.models import Date, Product
from bookstorepp.stock import StockManager
from bookstorepp.cart import CartManager, CartError

stock = StockManager("data/stock.txt")
stock.add_product(Product("114", "Refactoring", "Fowler", 6, 47.25))
print(stock.find("114"))
stock.modify_product("quantity", "114", "12")

cart = CartManager("data/cart.txt", "data/stock.txt", "data/orders.txt")
cart.add_to_cart("114", 2)
try:
    order = cart.purchase(Date(1, 3, 2024))
except CartError as exc:
    print(exc)
else:
    print(order.date, order.products)
```

- `StockManager(path)` reads the stock file (creating it with the sample books
  if missing). `products` gives a copy of the stock; `find(barcode)` gives the
  stored product or `None`; `add_product`, `delete_product` and
  `modify_product` change the stock and save it at once. `modify_product`
  raises `ValueError` for a field other than `price` or `quantity`.
- `CartManager(cart_path, stock_path, orders_path)` works on the three files.
  `load_cart()` returns `(barcode, quantity)` pairs and `save_cart()` writes
  them. `add_to_cart`, `modify_cart` and `delete_from_cart` raise `CartError`
  when the request cannot be carried out; `modify_cart` returns the new
  quantity. `purchase(date=None)` returns an `Order` holding the bought
  products and the date (today if none is given), or `None` for an empty cart.
- `Date.today()` gives the current local date; `str(date)` is `day month year`.

## Limitations

- The orders file records only the date and the barcodes and quantities
  bought; no prices or totals are written.
- The files are not locked, so two commands running at once can overwrite
  each other's changes.
- Deleting or modifying a barcode that is not in stock is not reported as an
  error; the stock file is simply saved unchanged.

## Running the tests

```
pip install .[test]
pytest
```