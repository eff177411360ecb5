from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Union

from cart_pricing.errors import ConfigError, ValidationError

MoneyLike = Union[Decimal, int, str, float]

CENT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_money(value: MoneyLike) -> Decimal:
    """
    Приводит значение к Decimal без прохода через двоичный float.

    float принимается только через его str(): 9.99 становится Decimal("9.99"),
    а не 9.9900000000000002131628...
    """
    if isinstance(value, bool):
        raise ValidationError(f"Not a monetary amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, str, float)):
        try:
            amount = Decimal(str(value) if isinstance(value, float) else value)
        except InvalidOperation as exc:
            raise ValidationError(f"Not a monetary amount: {value!r}") from exc
    else:
        raise ValidationError(f"Not a monetary amount: {value!r}")
    if not amount.is_finite():
        raise ValidationError(f"Not a monetary amount: {value!r}")
    return amount


def to_percent(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise ConfigError(f"Percent must be a number, got {value!r}")
    try:
        percent = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as exc:
        raise ConfigError(f"Percent must be a number, got {value!r}") from exc
    if not percent.is_finite() or not ZERO <= percent <= HUNDRED:
        raise ConfigError(f"Percent must be between 0 and 100, got {value!r}")
    return percent


def quantize_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(amount: Decimal) -> str:
    # " 9.99", "-1.50", "40.00"
    return format(quantize_money(amount), "5.2f")


def format_percent(percent: Decimal) -> str:
    # 10 -> "10", 12.50 -> "12.5"
    return format(percent.normalize(), "f")
