from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from cart_pricing import coupons
from cart_pricing.coupons import Coupon, NilCoupon
from cart_pricing.invoice import InvoicePrinter
from cart_pricing.models import LineItem, Product
from cart_pricing.money import ZERO

if TYPE_CHECKING:
    from cart_pricing.inventory import Inventory

logger = logging.getLogger(__name__)


class ShoppingCart:
    """
    Корзина покупателя.

    Создаётся через Inventory.new_cart(). Меняется только через add() и use();
    внутренней синхронизации нет, одна корзина = один владелец.
    """

    def __init__(self, inventory: Inventory) -> None:
        self.inventory = inventory
        self.items: List[LineItem] = []
        self.coupon: Coupon = NilCoupon()

    def __len__(self) -> int:
        return len(self.items)

    def _item_for(self, product: Product) -> Optional[LineItem]:
        for item in self.items:
            if item.product is product:
                return item
        return None

    def add(self, product_name: str, quantity: int = 1) -> None:
        product = self.inventory.product(product_name)
        item = self._item_for(product)

        if item:
            item.increase(quantity)
        else:
            self.items.append(LineItem(product, quantity))
        logger.debug("cart: added %s qty=%s (line count=%s)", product_name, quantity, self.count_of(product_name))

    def use(self, coupon_name: str) -> None:
        self.coupon = self.inventory.coupon(coupon_name)
        logger.debug("cart: coupon %r -> %r", coupon_name, self.coupon)

    def count_of(self, product_name: str) -> int:
        for item in self.items:
            if item.product_name == product_name:
                return item.count
        return 0

    def items_price(self) -> Decimal:
        return sum((item.price() for item in self.items), ZERO)

    def coupon_discount(self) -> Decimal:
        return coupons.coupon_discount(self.coupon, self.items_price())

    def total(self) -> Decimal:
        return self.items_price() - self.coupon_discount()

    def invoice(self) -> str:
        return InvoicePrinter(self).render()
