"""Stock file handling for the bookstore."""

from __future__ import annotations

import copy
from itertools import islice
from pathlib import Path

from bookstorepp.models import Product

_INITIAL_STOCK = (
    Product("111", "C++Primer", "Lippman", 10, 45.99),
    Product("112", "EffectiveC++", "Meyers", 5, 39.99),
    Product("113", "CleanCode", "Martin", 8, 42.50),
)

_FIELDS = ("price", "quantity")


def _parse_stock(text: str) -> list[Product]:
    tokens = text.split()
    if not tokens:
        return []
    count = int(tokens[0])
    records = list(islice(zip(*[iter(tokens[1:])] * 5), count))
    if len(records) < count:
        raise ValueError(f"stock file lists {count} products but holds {len(records)}")
    return [
        Product(barcode, name, author, int(quantity), float(price))
        for barcode, name, author, quantity, price in records
    ]


class StockManager:
    """Keeps the stock list and its file in step."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._stock: list[Product] = []
        self.ensure_file_exists()
        self.load()

    def ensure_file_exists(self) -> None:
        """Write the starter stock if the stock file is missing."""
        if not self.path.exists():
            self._stock = [copy.copy(p) for p in _INITIAL_STOCK]
            self.save()

    def load(self) -> None:
        """Read the stock file; a missing file gives an empty stock."""
        try:
            text = self.path.read_text()
        except FileNotFoundError:
            self._stock = []
            return
        self._stock = _parse_stock(text)

    def save(self) -> None:
        """Write the stock list to its file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        lines = [str(len(self._stock))]
        lines.extend(
            f"{p.barcode} {p.name} {p.author} {p.quantity} {p.price:g}" for p in self._stock
        )
        self.path.write_text("\n".join(lines) + "\n")

    @property
    def products(self) -> list[Product]:
        """A copy of the products in stock."""
        return [copy.copy(p) for p in self._stock]

    def find(self, barcode: str) -> Product | None:
        """Return the stocked product with this barcode, or None.

        The product returned is the stored one; call save() after changing it.
        """
        return next((p for p in self._stock if p.barcode == barcode), None)

    def add_product(self, product: Product) -> None:
        self._stock.append(product)
        self.save()

    def delete_product(self, barcode: str) -> None:
        self._stock = [p for p in self._stock if p.barcode != barcode]
        self.save()

    def modify_product(self, field: str, barcode: str, new_value: str) -> None:
        """Set the price or quantity of every product with this barcode."""
        if field not in _FIELDS:
            raise ValueError("Field must be 'price' or 'quantity'.")
        value = float(new_value) if field == "price" else int(new_value)
        for product in self._stock:
            if product.barcode == barcode:
                setattr(product, field, value)
        self.save()