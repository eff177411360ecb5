from __future__ import annotations

from typing import TYPE_CHECKING, List

from cart_pricing import coupons
from cart_pricing.money import format_amount

if TYPE_CHECKING:
    from cart_pricing.cart import ShoppingCart

DELIMITER = "+------------------------------------------------+----------+\n"
ROW = "| %-40s %5s | %8s |\n"


class InvoicePrinter:
    """
    Печатает корзину фиксированной таблицей:

        +------------------------------------------------+----------+
        | Name                                       qty |    price |
        +------------------------------------------------+----------+
        | Pen                                          1 |     9.99 |
        +------------------------------------------------+----------+
        | TOTAL                                          |     9.99 |
        +------------------------------------------------+----------+
    """

    def __init__(self, cart: ShoppingCart):
        self.cart = cart

    def __str__(self) -> str:
        return self.render()

    def render(self) -> str:
        lines: List[str] = []
        self._header(lines)
        self._items(lines)
        self._total(lines)
        return "".join(lines)

    def _header(self, lines: List[str]) -> None:
        lines.append(DELIMITER)
        lines.append(ROW % ("Name", "qty", "price"))
        lines.append(DELIMITER)

    def _items(self, lines: List[str]) -> None:
        for item in self.cart.items:
            lines.append(ROW % (item.product_name, item.count, format_amount(item.price_without_discount())))
            if item.is_discounted():
                lines.append(ROW % (f"  {item.discount_name()}", "", format_amount(-item.discount())))

        coupon_discount = self.cart.coupon_discount()
        if coupon_discount != 0:
            coupon = self.cart.coupon
            name = f"Coupon {coupon.name} - {coupons.description(coupon)}"
            lines.append(ROW % (name, "", format_amount(-coupon_discount)))

    def _total(self, lines: List[str]) -> None:
        lines.append(DELIMITER)
        lines.append(ROW % ("TOTAL", "", format_amount(self.cart.total())))
        lines.append(DELIMITER)
