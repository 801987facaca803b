"""Command line for managing stock and viewing orders."""

from __future__ import annotations

import sys
from pathlib import Path

from bookstorepp.models import Product
from bookstorepp.stock import StockManager

STOCK_PATH = Path("data/stock.txt")
ORDERS_PATH = Path("data/orders.txt")

_RED, _GREEN, _YELLOW, _BLUE, _CYAN = (f"\033[1;{n}m" for n in (31, 32, 33, 34, 36))
_RESET = "\033[0m"


def _error(message: str) -> int:
    print(f"{_RED}Error: {message}{_RESET}", file=sys.stderr)
    return 1


def _view_stock(manager: StockManager) -> None:
    products = manager.products
    if not products:
        print(f"{_YELLOW}No products in stock.{_RESET}")
    for p in products:
        print(
            f"{_CYAN}{p.barcode}{_RESET} | {_BLUE}{p.name}{_RESET} | "
            f"{_GREEN}{p.author}{_RESET} | {_YELLOW}{p.quantity}{_RESET} | "
            f"{_RED}{p.price:g}{_RESET}"
        )


def _view_orders() -> None:
    try:
        text = ORDERS_PATH.read_text()
    except OSError:
        print(f"{_YELLOW}No orders found.{_RESET}")
        return
    for line in text.splitlines():
        print(line)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return _error("No command provided.")
    cmd, rest = args[0], args[1:]

    try:
        manager = StockManager(STOCK_PATH)
        if cmd == "view_stock_products":
            _view_stock(manager)
        elif cmd == "add_product" and len(rest) == 5:
            barcode, name, author, qty_text, price_text = rest
            qty, price = int(qty_text), float(price_text)
            if qty < 0 or price < 0:
                raise ValueError("Quantity and price must be non-negative.")
            manager.add_product(Product(barcode, name, author, qty, price))
            print(f"{_GREEN}Product added successfully.{_RESET}")
        elif cmd == "delete_product" and len(rest) == 1:
            manager.delete_product(rest[0])
            print(f"{_YELLOW}Product deleted successfully.{_RESET}")
        elif cmd == "modify_product" and len(rest) == 3:
            manager.modify_product(*rest)
            print(f"{_BLUE}Product modified successfully.{_RESET}")
        elif cmd == "view_orders":
            _view_orders()
        else:
            return _error("Unknown command or incorrect arguments.")
    except (ValueError, OSError) as exc:
        return _error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())