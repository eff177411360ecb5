"""Pytest fixtures for the cart pricing engine."""

from decimal import Decimal

import pytest

from cart_pricing.inventory import Inventory


@pytest.fixture
def inventory() -> Inventory:
    inventory = Inventory()

    inventory.register_product("Green Tea", Decimal("0.79"), {"get_one_free": 3})
    inventory.register_product("Black Coffee", Decimal("1.99"), {"package": (2, 20)})
    inventory.register_product("Milk", Decimal("0.99"), {"threshold": (10, 10)})
    inventory.register_product("Cereal", Decimal("2.49"))  # No promotion

    inventory.register_coupon("TEATIME", {"percent": 20})
    inventory.register_coupon("FIVEOFF", {"amount": Decimal("5.00")})
    inventory.register_coupon("HUGE", {"amount": Decimal("150.00")})

    return inventory


@pytest.fixture
def cart(inventory):
    return inventory.new_cart()
