"""Tests for the fixed-width text invoice."""
from decimal import Decimal

from cart_pricing.inventory import Inventory
from cart_pricing.invoice import InvoicePrinter

DELIMITER = "+------------------------------------------------+----------+\n"
HEADER = "| Name                                       qty |    price |\n"


def test_single_undiscounted_item():
    inventory = Inventory()
    inventory.register_product("Pen", Decimal("9.99"))
    cart = inventory.new_cart()
    cart.add("Pen")

    assert cart.invoice() == (
        DELIMITER
        + HEADER
        + DELIMITER
        + "| Pen                                          1 |     9.99 |\n"
        + DELIMITER
        + "| TOTAL                                          |     9.99 |\n"
        + DELIMITER
    )


def test_empty_cart_invoice():
    cart = Inventory().new_cart()

    assert cart.invoice() == (
        DELIMITER
        + HEADER
        + DELIMITER
        + DELIMITER
        + "| TOTAL                                          |     0.00 |\n"
        + DELIMITER
    )


def test_discount_and_coupon_rows(cart):
    cart.add("Green Tea", 4)
    cart.add("Black Coffee", 3)
    cart.add("Cereal")
    cart.use("TEATIME")

    assert cart.invoice() == (
        DELIMITER
        + HEADER
        + DELIMITER
        + "| Green Tea                                    4 |     3.16 |\n"
        + "|   buy 2, get 1 free                            |    -0.79 |\n"
        + "| Black Coffee                                 3 |     5.97 |\n"
        + "|   get 20% off for every 2                      |    -0.80 |\n"
        + "| Cereal                                       1 |     2.49 |\n"
        + "| Coupon TEATIME - 20% off                       |    -2.01 |\n"
        + DELIMITER
        + "| TOTAL                                          |     8.03 |\n"
        + DELIMITER
    )


def test_threshold_and_amount_coupon_rows():
    inventory = Inventory()
    inventory.register_product("Pen", Decimal("4.00"), {"threshold": (2, 50)})
    inventory.register_product("shirt", Decimal("20.00"), {"package": (2, 50)})
    inventory.register_coupon("FIVEOFF", {"amount": "5.00"})
    cart = inventory.new_cart()
    cart.add("shirt", 4)
    cart.use("FIVEOFF")

    lines = cart.invoice().splitlines(keepends=True)

    assert lines[3] == "| shirt                                        4 |    80.00 |\n"
    assert lines[4] == "|   get 50% off for every 2                      |   -40.00 |\n"
    assert lines[5] == "| Coupon FIVEOFF - 5.00 off                      |    -5.00 |\n"
    assert lines[7] == "| TOTAL                                          |    35.00 |\n"

    cart.add("Pen", 5)
    lines = cart.invoice().splitlines(keepends=True)
    assert "|   50% off of every after the 2nd               |    -6.00 |\n" in lines


def test_no_coupon_row_when_discount_is_zero(cart):
    cart.add("Cereal")
    cart.use("NOPE")

    assert "Coupon" not in cart.invoice()


def test_printer_str_matches_cart_invoice(cart):
    cart.add("Milk", 11)

    assert str(InvoicePrinter(cart)) == cart.invoice()
    assert all(len(line) == len(DELIMITER) for line in cart.invoice().splitlines(keepends=True))
