"""Plain data records shared by the stock and cart tools."""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field


@dataclass
class Product:
    """A book held in stock, or a line of a purchase."""

    barcode: str
    name: str
    author: str
    quantity: int
    price: float


@dataclass(frozen=True)
class Date:
    """A calendar day, written as ``day month year``."""

    day: int
    month: int
    year: int

    @classmethod
    def today(cls) -> Date:
        """Return the current local date."""
        now = datetime.date.today()
        return cls(day=now.day, month=now.month, year=now.year)

    def __str__(self) -> str:
        return f"{self.day} {self.month} {self.year}"


@dataclass
class Order:
    """The products bought together on one day."""

    products: list[Product] = field(default_factory=list)
    date: Date = field(default_factory=Date.today)