"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from freshcart.domain.exceptions import StorageError
from freshcart.infrastructure.cli.main import cli
from freshcart.infrastructure.persistence.json_cart_store import JsonCartStore

TOKEN = "s3cret"


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    env = {"FRESHCART_DATA_DIR": str(tmp_path), "FRESHCART_ADMIN_TOKEN": TOKEN}

    def invoke(*args: str):
        return runner.invoke(cli, list(args), env=env)

    return invoke


@pytest.fixture
def seeded(run):
    result = run("product", "seed", "--token", TOKEN)
    assert result.exit_code == 0, result.output
    return run


def _potato_id(run) -> str:
    listing = run("product", "list").output
    for line in listing.splitlines():
        if "Potato" in line:
            return line.split()[0]
    raise AssertionError(f"Potato not listed:\n{listing}")


class TestProductCommands:

    def test_seed_and_list(self, seeded):
        result = seeded("product", "list")
        assert result.exit_code == 0
        assert "Potato" in result.output
        assert "Carrot" in result.output

    def test_admin_commands_need_token(self, run):
        result = run("product", "add", "--name", "Leek", "--price", "80")
        assert result.exit_code != 0
        assert "Invalid administrator token" in result.output

    def test_wrong_token_rejected(self, run):
        result = run("product", "seed", "--token", "nope")
        assert result.exit_code != 0
        assert "Invalid administrator token" in result.output

    def test_add_update_delete(self, run):
        result = run("product", "add", "--name", "Leek", "--price", "80", "--token", TOKEN)
        assert result.exit_code == 0, result.output
        assert "Product #1 'Leek' added" in result.output

        result = run("product", "update", "--id", "1", "--price", "85", "--out-of-stock", "--token", TOKEN)
        assert result.exit_code == 0, result.output
        assert "85.00" in result.output

        result = run("product", "delete", "--id", "1", "--token", TOKEN)
        assert result.exit_code == 0, result.output
        assert "No products found." in run("product", "list").output


class TestShoppingFlow:

    def test_potato_checkout(self, seeded):
        pid = _potato_id(seeded)

        assert seeded("cart", "add", "--product-id", pid, "--quantity", "1").exit_code == 0
        seeded("cart", "inc", "--product-id", pid)
        result = seeded("cart", "inc", "--product-id", pid)
        assert "2.0" in result.output
        assert "90.00" in result.output

        result = seeded(
            "cart", "checkout",
            "--customer", "Ivan",
            "--phone", "+79991234567",
            "--address", "Main St 1",
        )
        assert result.exit_code == 0, result.output
        assert "Order #1 placed (status=PENDING)" in result.output

        assert "Cart is empty." in seeded("cart", "show").output

        data = json.loads(seeded("order", "show", "--id", "1", "--json").output)
        assert data["status"] == "PENDING"
        assert data["totalAmount"] == "90.00"
        assert data["whatsappNumber"] == "+79991234567"
        assert data["items"][0]["quantity"] == "2.0"
        assert data["items"][0]["price"] == "45.00"

    def test_quantity_below_minimum_is_clamped(self, seeded):
        pid = _potato_id(seeded)
        seeded("cart", "add", "--product-id", pid)
        result = seeded("cart", "set", "--product-id", pid, "--quantity", "0.5")
        assert result.exit_code == 0
        assert "1.0" in result.output

    def test_carts_belong_to_sessions(self, seeded):
        pid = _potato_id(seeded)
        seeded("cart", "add", "--product-id", pid, "--session", "alice")
        assert "Cart is empty." in seeded("cart", "show", "--session", "bob").output
        assert "Potato" in seeded("cart", "show", "--session", "alice").output

    def test_failed_checkout_keeps_cart(self, seeded):
        pid = _potato_id(seeded)
        seeded("cart", "add", "--product-id", pid)
        result = seeded(
            "cart", "checkout", "--customer", "Ivan", "--phone", "123", "--address", "Main St 1",
        )
        assert result.exit_code != 0
        assert "Invalid contact number" in result.output
        assert "Potato" in seeded("cart", "show").output

    def test_order_number_reported_when_cart_cleanup_fails(self, seeded, monkeypatch):
        pid = _potato_id(seeded)
        seeded("cart", "add", "--product-id", pid)

        def broken_discard(self, session):
            raise StorageError("disk full")

        monkeypatch.setattr(JsonCartStore, "discard", broken_discard)
        result = seeded(
            "cart", "checkout", "--customer", "Ivan", "--phone", "+79991234567", "--address", "Main St 1",
        )
        assert result.exit_code != 0
        assert "Order #1 placed" in result.output
        assert "Order #1 was placed, but the cart could not be cleared: disk full" in result.output
        assert "cart clear --session default" in result.output

    def test_unknown_product(self, seeded):
        result = seeded("cart", "add", "--product-id", "999")
        assert result.exit_code != 0
        assert "not found" in result.output


class TestOrderCommands:

    def _place_order(self, run) -> None:
        pid = _potato_id(run)
        run("cart", "add", "--product-id", pid)
        result = run(
            "cart", "checkout", "--customer", "Ivan", "--phone", "+79991234567", "--address", "Main St 1",
        )
        assert result.exit_code == 0, result.output

    def test_status_lifecycle(self, seeded):
        self._place_order(seeded)

        result = seeded("order", "status", "--id", "1", "--to", "PROCESSING", "--token", TOKEN)
        assert result.exit_code == 0, result.output
        assert "now PROCESSING" in result.output

        result = seeded("order", "status", "--id", "1", "--to", "PENDING", "--token", TOKEN)
        assert result.exit_code != 0
        assert "Cannot move order #1 from PROCESSING to PENDING" in result.output

        result = seeded("order", "status", "--id", "1", "--to", "DELIVERED", "--token", TOKEN)
        assert result.exit_code == 0, result.output

        result = seeded("order", "status", "--id", "1", "--to", "CANCELLED", "--token", TOKEN)
        assert result.exit_code != 0
        assert "no further status changes" in result.output

    def test_status_needs_token(self, seeded):
        self._place_order(seeded)
        result = seeded("order", "status", "--id", "1", "--to", "PROCESSING")
        assert result.exit_code != 0
        assert "PENDING" in seeded("order", "list").output

    def test_list_and_delete(self, seeded):
        self._place_order(seeded)
        assert "Ivan" in seeded("order", "list").output

        result = seeded("order", "delete", "--id", "1", "--token", TOKEN)
        assert result.exit_code == 0, result.output
        assert "No orders found." in seeded("order", "list").output

        result = seeded("order", "delete", "--id", "1", "--token", TOKEN)
        assert result.exit_code != 0
        assert "Order #1 not found" in result.output
