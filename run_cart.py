from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Tuple

from cart_pricing.errors import PricingError
from cart_pricing.inventory import Inventory, load_catalog

CATALOG = {
    "products": [
        {"name": "Green Tea", "price": "0.79", "promotion": {"get_one_free": 3}},
        {"name": "Black Coffee", "price": "1.99", "promotion": {"package": (2, 20)}},
        {"name": "Milk", "price": "0.99", "promotion": {"threshold": (10, 10)}},
        {"name": "Cereal", "price": "2.49"},
    ],
    "coupons": [
        {"name": "TEATIME", "type": {"percent": 20}},
        {"name": "FIVEOFF", "type": {"amount": "5.00"}},
    ],
}


def seed(inventory: Inventory) -> None:
    load_catalog(inventory, CATALOG)


def parse_item(value: str) -> Tuple[str, int]:
    """"Milk" -> ("Milk", 1), "Milk:3" -> ("Milk", 3)."""
    name, sep, qty = value.rpartition(":")
    if not sep:
        return value, 1
    try:
        return name, int(qty)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"bad quantity in {value!r}") from exc


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    p = argparse.ArgumentParser(description="Price one cart against the demo catalog and print the invoice.")
    p.add_argument("--item", dest="items", type=parse_item, action="append", default=[], help="NAME[:QTY], можно повторять")
    p.add_argument("--coupon", type=str, default=None)
    args = p.parse_args(argv)

    inventory = Inventory()
    seed(inventory)

    cart = inventory.new_cart()
    try:
        for name, qty in args.items:
            cart.add(name, qty)
    except PricingError as e:
        logging.error("cart rejected: %s", e)
        return 1
    if args.coupon:
        cart.use(args.coupon)

    print(cart.invoice(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
