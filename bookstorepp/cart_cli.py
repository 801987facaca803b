"""Command line for filling and buying the shopping cart."""

from __future__ import annotations

import sys

from bookstorepp.cart import CartError, CartManager

CART_PATH = "data/cart.txt"
STOCK_PATH = "data/stock.txt"
ORDERS_PATH = "data/orders.txt"

_RED, _GREEN, _YELLOW, _BLUE = (f"\033[1;{n}m" for n in (31, 32, 33, 34))
_RESET = "\033[0m"


def _error(message: str) -> int:
    print(f"{_RED}Error: {message}{_RESET}", file=sys.stderr)
    return 1


def _view_cart(cart: CartManager) -> None:
    items = cart.load_cart()
    if not items:
        print(f"{_YELLOW}Your cart is empty.{_RESET}")
        return
    for barcode, qty in items:
        print(f"{_GREEN}{barcode}{_RESET} x {qty}")


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return _error("No command provided.")
    cmd, rest = args[0], args[1:]
    cart = CartManager(CART_PATH, STOCK_PATH, ORDERS_PATH)

    try:
        if cmd == "view_cart":
            _view_cart(cart)
        elif cmd == "add_product" and len(rest) == 2:
            cart.add_to_cart(rest[0], int(rest[1]))
            print(f"{_BLUE}Added to cart.{_RESET}")
        elif cmd == "modify_product" and len(rest) == 2:
            if cart.modify_cart(rest[0], int(rest[1])) == 0:
                print(f"{_YELLOW}Product removed from cart.{_RESET}")
            else:
                print(f"{_BLUE}Cart updated.{_RESET}")
        elif cmd == "delete_product" and len(rest) == 1:
            cart.delete_from_cart(rest[0])
            print(f"{_YELLOW}Product removed from cart.{_RESET}")
        elif cmd == "purchase":
            if cart.purchase() is None:
                print(f"{_YELLOW}Cart is empty. Nothing to purchase.{_RESET}")
            else:
                print(f"{_GREEN}Purchase successful! Stock updated and order saved.{_RESET}")
        else:
            return _error("Unknown command or incorrect arguments.")
    except (CartError, ValueError, OSError) as exc:
        return _error(str(exc))
    return 0


if __name__ == "__main__":
    sys.exit(main())