"""Shopping cart kept in a file, checked against the stock file."""

from __future__ import annotations

from pathlib import Path

from bookstorepp.models import Date, Order, Product
from bookstorepp.stock import StockManager


class CartError(Exception):
    """A cart operation that cannot be carried out."""


def _parse_cart(text: str) -> list[tuple[str, int]]:
    cart: list[tuple[str, int]] = []
    tokens = iter(text.split())
    for barcode, qty in zip(tokens, tokens):
        try:
            cart.append((barcode, int(qty)))
        except ValueError:
            break
    return cart


class CartManager:
    """Adds, changes and buys the items of a cart."""

    def __init__(
        self,
        cart_path: str | Path = "data/cart.txt",
        stock_path: str | Path = "data/stock.txt",
        orders_path: str | Path = "data/orders.txt",
    ) -> None:
        self.cart_path = Path(cart_path)
        self.stock_path = Path(stock_path)
        self.orders_path = Path(orders_path)

    def load_cart(self) -> list[tuple[str, int]]:
        """Return the cart as (barcode, quantity) pairs; empty if no file."""
        try:
            return _parse_cart(self.cart_path.read_text())
        except FileNotFoundError:
            return []

    def save_cart(self, cart: list[tuple[str, int]]) -> None:
        self.cart_path.parent.mkdir(parents=True, exist_ok=True)
        self.cart_path.write_text("".join(f"{bc} {qty}\n" for bc, qty in cart))

    def add_to_cart(self, barcode: str, qty: int) -> None:
        """Add qty of a stocked product, merging with any existing line."""
        if qty <= 0:
            raise CartError("Quantity must be positive.")
        if StockManager(self.stock_path).find(barcode) is None:
            raise CartError(f"Product with barcode {barcode} does not exist in stock.")
        cart = self.load_cart()
        if any(bc == barcode for bc, _ in cart):
            cart = [(bc, q + qty) if bc == barcode else (bc, q) for bc, q in cart]
        else:
            cart.append((barcode, qty))
        self.save_cart(cart)

    def modify_cart(self, barcode: str, new_qty: int) -> int:
        """Set the quantity of a cart line; zero removes it. Returns new_qty."""
        if new_qty < 0:
            raise CartError("Quantity cannot be negative.")
        cart = self.load_cart()
        if not any(bc == barcode for bc, _ in cart):
            raise CartError("Product not found in cart.")
        if new_qty == 0:
            self.delete_from_cart(barcode)
            return 0
        self.save_cart([(bc, new_qty) if bc == barcode else (bc, q) for bc, q in cart])
        return new_qty

    def delete_from_cart(self, barcode: str) -> None:
        cart = self.load_cart()
        remaining = [(bc, q) for bc, q in cart if bc != barcode]
        if len(remaining) == len(cart):
            raise CartError("Product not found in cart.")
        self.save_cart(remaining)

    def purchase(self, date: Date | None = None) -> Order | None:
        """Buy everything in the cart.

        Takes the quantities off the stock, appends the order to the orders
        file and empties the cart. Returns None when the cart is empty.
        """
        cart = self.load_cart()
        if not cart:
            return None
        if not self.stock_path.exists():
            raise CartError("Cannot open stock file.")
        stock = StockManager(self.stock_path)

        for barcode, qty in cart:
            product = stock.find(barcode)
            if product is None:
                raise CartError(f"Product with barcode {barcode} not found in stock.")
            if product.quantity < qty:
                raise CartError(
                    f"Insufficient stock for product {product.name}. "
                    f"Requested: {qty}, Available: {product.quantity}"
                )

        bought: list[Product] = []
        for barcode, qty in cart:
            product = stock.find(barcode)
            product.quantity -= qty
            bought.append(Product(product.barcode, product.name, product.author, qty, product.price))
        try:
            stock.save()
        except OSError as exc:
            raise CartError("Cannot write to stock file.") from exc

        order = Order(bought, date if date is not None else Date.today())
        lines = [str(order.date), *(f"{bc} {qty}" for bc, qty in cart), ""]
        try:
            self.orders_path.parent.mkdir(parents=True, exist_ok=True)
            with self.orders_path.open("a") as orders:
                orders.write("\n".join(lines) + "\n")
        except OSError as exc:
            raise CartError("Cannot write to orders file.") from exc

        self.save_cart([])
        return order