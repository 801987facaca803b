import pytest

from bookstorepp.admin_cli import main
from bookstorepp.stock import StockManager


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_no_command(capsys):
    assert main([]) == 1
    assert "No command provided." in capsys.readouterr().err


def test_view_stock_lists_starter_products(capsys):
    assert main(["view_stock_products"]) == 0
    out = capsys.readouterr().out
    assert "C++Primer" in out
    assert "CleanCode" in out
    assert len(out.splitlines()) == 3


def test_add_product_then_view(capsys, workdir):
    assert main(["add_product", "200", "Dune", "Herbert", "4", "9.5"]) == 0
    assert "Product added successfully." in capsys.readouterr().out
    assert StockManager(workdir / "data" / "stock.txt").find("200").quantity == 4


def test_add_product_negative_rejected(capsys):
    assert main(["add_product", "200", "Dune", "Herbert", "-1", "9.5"]) == 1
    assert "Quantity and price must be non-negative." in capsys.readouterr().err


def test_add_product_bad_number(capsys):
    assert main(["add_product", "200", "Dune", "Herbert", "x", "9.5"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_delete_product(workdir, capsys):
    assert main(["delete_product", "111"]) == 0
    assert "Product deleted successfully." in capsys.readouterr().out
    assert StockManager(workdir / "data" / "stock.txt").find("111") is None


def test_modify_product(workdir):
    assert main(["modify_product", "quantity", "112", "20"]) == 0
    assert StockManager(workdir / "data" / "stock.txt").find("112").quantity == 20


def test_modify_product_bad_field(capsys):
    assert main(["modify_product", "name", "112", "x"]) == 1
    assert "Field must be 'price' or 'quantity'." in capsys.readouterr().err


def test_view_orders_missing(capsys):
    assert main(["view_orders"]) == 0
    assert "No orders found." in capsys.readouterr().out


def test_view_orders_prints_file(workdir, capsys):
    main(["view_stock_products"])
    capsys.readouterr()
    (workdir / "data" / "orders.txt").write_text("1 2 2024\n111 2\n\n")
    assert main(["view_orders"]) == 0
    assert capsys.readouterr().out == "1 2 2024\n111 2\n\n"


@pytest.mark.parametrize("args", [["bogus"], ["delete_product"], ["add_product", "1"]])
def test_unknown_or_wrong_arguments(args, capsys):
    assert main(args) == 1
    assert "Unknown command or incorrect arguments." in capsys.readouterr().err