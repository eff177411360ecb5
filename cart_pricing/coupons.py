from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Union

from cart_pricing.errors import ConfigError, ValidationError
from cart_pricing.money import HUNDRED, ZERO, format_percent, quantize_money, to_money, to_percent


@dataclass(frozen=True, slots=True)
class NilCoupon:
    """Отсутствие купона: корзина начинает именно с него."""

    name: str = ""


@dataclass(frozen=True, slots=True)
class PercentOff:
    name: str
    percent: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "percent", to_percent(self.percent))


@dataclass(frozen=True, slots=True)
class AmountOff:
    name: str
    amount: Decimal

    def __post_init__(self) -> None:
        try:
            amount = to_money(self.amount)
        except ValidationError as exc:
            raise ConfigError(str(exc)) from exc
        if amount < ZERO:
            raise ConfigError(f"Coupon amount cannot be negative, got {amount}")
        object.__setattr__(self, "amount", amount)


Coupon = Union[NilCoupon, PercentOff, AmountOff]


def coupon_discount(coupon: Coupon, subtotal: Decimal) -> Decimal:
    match coupon:
        case NilCoupon():
            return ZERO
        case PercentOff(percent=percent):
            return subtotal * percent / HUNDRED
        case AmountOff(amount=amount):
            # купон не может увести заказ в минус
            return min(subtotal, amount)
        case _:
            raise TypeError(f"Unknown coupon: {coupon!r}")


def description(coupon: Coupon) -> str:
    match coupon:
        case NilCoupon():
            return ""
        case PercentOff(percent=percent):
            return f"{format_percent(percent)}% off"
        case AmountOff(amount=amount):
            return f"{quantize_money(amount):.2f} off"
        case _:
            raise TypeError(f"Unknown coupon: {coupon!r}")


def parse_coupon(name: str, config: Mapping[str, Any]) -> Coupon:
    """{"percent": 10} -> PercentOff, {"amount": "5.00"} -> AmountOff."""
    if not isinstance(config, Mapping) or len(config) != 1:
        raise ConfigError(f"Unknown coupon: {config!r}")

    tag, value = next(iter(config.items()))
    if tag == "percent":
        return PercentOff(name, value)
    if tag == "amount":
        return AmountOff(name, value)
    raise ConfigError(f"Unknown coupon: {config!r}")
