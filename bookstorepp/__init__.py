"""File-backed bookstore: stock administration, a shopping cart and purchases."""

__version__ = "0.1.0"
__all__ = ["models", "stock", "cart", "admin_cli", "cart_cli"]