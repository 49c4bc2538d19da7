"""CLI tests through click's CliRunner, against JSON files in tmp_path."""

import json

import pytest
from click.testing import CliRunner

from shopcart.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()

    def _run(*args: str, as_json: bool = True):
        base = ["--data-dir", str(tmp_path)]
        if as_json:
            base.append("--json")
        return runner.invoke(cli, [*base, *args])

    return _run


def _ok(result):
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


def _add_product(run, name: str, price: str, stock: int) -> str:
    return _ok(run("product", "add", "--name", name, "--price", price, "--stock", str(stock)))[
        "product_id"
    ]


class TestCartCommands:

    def test_full_flow(self, run):
        p1 = _add_product(run, "P1", "10.00", 100)
        p2 = _add_product(run, "P2", "15.00", 100)

        cart = _ok(run("cart", "create"))
        cart_id = cart["cart_id"]
        assert cart["total_price"] == "0.00"

        assert _ok(run("cart", "add", "--id", cart_id, "--product", p1, "--quantity", "2"))[
            "total_price"
        ] == "20.00"
        assert _ok(run("cart", "add", "--id", cart_id, "--product", p2, "--quantity", "1"))[
            "total_price"
        ] == "35.00"
        assert _ok(run("cart", "update", "--id", cart_id, "--product", p1, "--quantity", "3"))[
            "total_price"
        ] == "45.00"
        shown = _ok(run("cart", "remove", "--id", cart_id, "--product", p2))
        assert shown["total_price"] == "30.00"
        assert shown["item_count"] == 1

        order_id = _ok(run("cart", "checkout", "--id", cart_id, "--email", "a@example.com"))[
            "order_id"
        ]

        order = _ok(run("order", "show", "--id", order_id))
        assert order["total_amount"] == "30.00"
        assert order["status"] == "pending"
        assert order["items"][0]["quantity"] == 3

        after = _ok(run("cart", "show", "--id", cart_id))
        assert after["items"] == []
        assert after["total_price"] == "0.00"

    def test_show_by_session(self, run):
        created = _ok(run("cart", "create", "--session", "session_42"))
        shown = _ok(run("cart", "show", "--session", "session_42"))
        assert shown["cart_id"] == created["cart_id"]

    def test_missing_cart_reported(self, run):
        result = run("cart", "show", "--id", "00000000-0000-0000-0000-0000000000ff")
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_insufficient_stock_reported(self, run):
        p1 = _add_product(run, "P1", "10.00", 1)
        cart_id = _ok(run("cart", "create"))["cart_id"]

        result = run("cart", "add", "--id", cart_id, "--product", p1, "--quantity", "2")

        assert result.exit_code == 1
        assert "Insufficient stock" in result.output

    def test_empty_checkout_reported(self, run):
        cart_id = _ok(run("cart", "create"))["cart_id"]
        result = run("cart", "checkout", "--id", cart_id, "--email", "a@example.com")
        assert result.exit_code == 1
        assert "empty cart" in result.output

    def test_malformed_id_reported(self, run):
        result = run("cart", "show", "--id", "42")
        assert result.exit_code == 1
        assert "valid UUID" in result.output

    def test_table_output(self, run):
        p1 = _add_product(run, "Widget", "10.00", 5)
        cart_id = _ok(run("cart", "create"))["cart_id"]

        result = run(
            "cart", "add", "--id", cart_id, "--product", p1, "--quantity", "2", as_json=False
        )

        assert result.exit_code == 0, result.output
        assert "Widget" in result.output
        assert "20.00" in result.output


class TestProductAndOrderCommands:

    def test_product_list_in_stock(self, run):
        _add_product(run, "Widget", "10.00", 5)
        _add_product(run, "Gadget", "15.00", 0)

        listed = _ok(run("product", "list", "--in-stock"))
        assert [p["name"] for p in listed] == ["Widget"]

    def test_product_update(self, run):
        pid = _add_product(run, "Widget", "10.00", 5)
        result = run("product", "update", "--id", pid, "--stock", "9", as_json=False)
        assert result.exit_code == 0, result.output
        assert "9 in stock" in result.output

    def test_order_list_empty(self, run):
        result = run("order", "list", as_json=False)
        assert result.exit_code == 0
        assert "No orders found." in result.output
