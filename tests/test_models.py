import datetime

from bookstorepp.models import Date, Order, Product


def test_date_str_uses_day_month_year_without_padding():
    assert str(Date(5, 3, 2024)) == "5 3 2024"


def test_date_today_matches_local_date():
    before = datetime.date.today()
    today = Date.today()
    after = datetime.date.today()
    assert (today.year, today.month, today.day) in {
        (before.year, before.month, before.day),
        (after.year, after.month, after.day),
    }


def test_date_is_comparable_by_value():
    assert Date(1, 2, 2024) == Date(1, 2, 2024)
    assert Date(1, 2, 2024) != Date(2, 1, 2024)


def test_product_keeps_fields():
    product = Product("111", "C++Primer", "Lippman", 10, 45.99)
    assert product.barcode == "111"
    assert product.name == "C++Primer"
    assert product.author == "Lippman"
    assert product.quantity == 10
    assert product.price == 45.99


def test_order_holds_products_and_date():
    products = [Product("112", "EffectiveC++", "Meyers", 2, 39.99)]
    order = Order(products, Date(9, 9, 2023))
    assert order.products == products
    assert order.date == Date(9, 9, 2023)


def test_order_defaults_are_independent():
    first = Order()
    second = Order()
    first.products.append(Product("1", "a", "b", 1, 1.0))
    assert second.products == []
    assert first.date == Date.today()