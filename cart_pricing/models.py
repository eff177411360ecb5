from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from cart_pricing import promotions
from cart_pricing.errors import InvalidQuantityError, QuantityLimitError, ValidationError
from cart_pricing.money import ZERO, to_money
from cart_pricing.promotions import NoPromotion, Promotion

MAX_NAME_LENGTH = 40
MAX_PRICE = Decimal("1000")
MAX_ITEM_COUNT = 99


@dataclass(frozen=True, slots=True)
class Product:
    name: str
    price: Decimal
    promotion: Promotion = field(default_factory=NoPromotion)

    def __post_init__(self) -> None:
        object.__setattr__(self, "price", to_money(self.price))
        if not 1 <= len(self.name) <= MAX_NAME_LENGTH:
            raise ValidationError(f"Name should be 1 to {MAX_NAME_LENGTH} characters long, got {self.name!r}")
        if not ZERO < self.price < MAX_PRICE:
            raise ValidationError(f"Only prices between 0.01 and 999.99 allowed, got {self.price}")


class LineItem:
    """
    Строка корзины: товар и его количество.

    Товар не копируется: им владеет Inventory, строка только ссылается на него.
    """

    def __init__(self, product: Product, count: int):
        self.product = product
        self.count = 0
        self.increase(count)

    def __repr__(self) -> str:
        return f"LineItem(product={self.product.name!r}, count={self.count})"

    @property
    def product_name(self) -> str:
        return self.product.name

    def increase(self, count: int) -> None:
        if count <= 0:
            raise InvalidQuantityError("You have to add at least one item")
        if self.count + count > MAX_ITEM_COUNT:
            raise QuantityLimitError(
                f"Maximum {MAX_ITEM_COUNT} items of each product can be bought: "
                f"have={self.count}, adding={count}"
            )
        self.count += count

    def price_without_discount(self) -> Decimal:
        return self.product.price * self.count

    def discount(self) -> Decimal:
        return promotions.discount(self.product.promotion, self.count, self.product.price)

    def discount_name(self) -> str:
        return promotions.invoice_text(self.product.promotion)

    def price(self) -> Decimal:
        return self.price_without_discount() - self.discount()

    def is_discounted(self) -> bool:
        return self.discount() != 0
