from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Optional

from cart_pricing.cart import ShoppingCart
from cart_pricing.coupons import Coupon, NilCoupon, parse_coupon
from cart_pricing.errors import ConfigError, NotFoundError
from cart_pricing.models import Product
from cart_pricing.money import MoneyLike
from cart_pricing.promotions import parse_promotion

logger = logging.getLogger(__name__)


class Inventory:
    """
    Каталог товаров и купонов в памяти.

    Заполняется один раз при старте (register_*), дальше только читается:
    корзины ищут в нём товары и купоны по имени. Поиск возвращает первое
    совпадение, уникальность имён не проверяется.
    """

    def __init__(self) -> None:
        self.products: List[Product] = []
        self.coupons: List[Coupon] = []

    def register_product(self, name: str, price: MoneyLike, promotion: Optional[Any] = None) -> Product:
        product = Product(name, price, parse_promotion(promotion))
        self.products.append(product)
        logger.info("product registered: %s price=%s promotion=%r", product.name, product.price, product.promotion)
        return product

    def register_coupon(self, name: str, config: Mapping[str, Any]) -> Coupon:
        coupon = parse_coupon(name, config)
        self.coupons.append(coupon)
        logger.info("coupon registered: %r", coupon)
        return coupon

    def product(self, name: str) -> Product:
        for product in self.products:
            if product.name == name:
                return product
        raise NotFoundError(f"Unexisting product: {name}")

    def coupon(self, name: str) -> Coupon:
        # неизвестный купон не ошибка: корзина просто остаётся без скидки
        for coupon in self.coupons:
            if coupon.name == name:
                return coupon
        return NilCoupon()

    def new_cart(self) -> ShoppingCart:
        return ShoppingCart(self)


def _required(entry: Mapping[str, Any], key: str, kind: str) -> Any:
    try:
        return entry[key]
    except (KeyError, TypeError) as exc:
        raise ConfigError(f"{kind} entry {entry!r} is missing {key!r}") from exc


def load_catalog(inventory: Inventory, catalog: Mapping[str, Any]) -> Inventory:
    """
    Регистрирует товары и купоны из обычного словаря:

        {
            "products": [{"name": "tea", "price": "1.00", "promotion": {"get_one_free": 3}}],
            "coupons": [{"name": "TEATIME", "type": {"percent": 20}}],
        }

    Ошибки регистрации (ValidationError/ConfigError) не перехватываются.
    Каталог собирается в отдельном Inventory: при ошибке исходный не меняется.
    """
    staged = Inventory()
    for entry in catalog.get("products", []):
        staged.register_product(
            _required(entry, "name", "Product"),
            _required(entry, "price", "Product"),
            entry.get("promotion"),
        )
    for entry in catalog.get("coupons", []):
        staged.register_coupon(_required(entry, "name", "Coupon"), _required(entry, "type", "Coupon"))

    inventory.products.extend(staged.products)
    inventory.coupons.extend(staged.coupons)
    return inventory
