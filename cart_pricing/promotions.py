from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Union

from cart_pricing.errors import ConfigError
from cart_pricing.money import HUNDRED, ZERO, format_percent, to_percent

_ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


def _integer(value: Any, what: str, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{what} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigError(f"{what} must be >= {minimum}, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class NoPromotion:
    pass


@dataclass(frozen=True, slots=True)
class GetOneFree:
    n: int

    def __post_init__(self) -> None:
        _integer(self.n, "GetOneFree n", 2)


@dataclass(frozen=True, slots=True)
class PackageDiscount:
    size: int
    percent: Decimal

    def __post_init__(self) -> None:
        _integer(self.size, "Package size", 1)
        object.__setattr__(self, "percent", to_percent(self.percent))


@dataclass(frozen=True, slots=True)
class ThresholdDiscount:
    threshold: int
    percent: Decimal

    def __post_init__(self) -> None:
        _integer(self.threshold, "Threshold", 0)
        object.__setattr__(self, "percent", to_percent(self.percent))


Promotion = Union[NoPromotion, GetOneFree, PackageDiscount, ThresholdDiscount]


def discount(promotion: Promotion, quantity: int, unit_price: Decimal) -> Decimal:
    """Скидка по акции для `quantity` единиц товара по цене `unit_price`."""
    match promotion:
        case NoPromotion():
            return ZERO
        case GetOneFree(n=n):
            # каждая n-я единица бесплатна (делим на n, а не на n - 1)
            return (quantity // n) * unit_price
        case PackageDiscount(size=size, percent=percent):
            packages = quantity // size
            return packages * size * percent / HUNDRED * unit_price
        case ThresholdDiscount(threshold=threshold, percent=percent):
            above = max(quantity - threshold, 0)
            return above * percent / HUNDRED * unit_price
        case _:
            raise TypeError(f"Unknown promotion: {promotion!r}")


def invoice_text(promotion: Promotion) -> str:
    match promotion:
        case NoPromotion():
            return ""
        case GetOneFree(n=n):
            return f"buy {n - 1}, get 1 free"
        case PackageDiscount(size=size, percent=percent):
            return f"get {format_percent(percent)}% off for every {size}"
        case ThresholdDiscount(threshold=threshold, percent=percent):
            suffix = _ORDINAL_SUFFIXES.get(threshold, "th")
            return f"{format_percent(percent)}% off of every after the {threshold}{suffix}"
        case _:
            raise TypeError(f"Unknown promotion: {promotion!r}")


def _pair(tag: str, options: Any) -> tuple[Any, Any]:
    # (size, percent) или {size: percent}
    if isinstance(options, Mapping):
        if len(options) != 1:
            raise ConfigError(f"Promotion {tag!r} expects a single pair, got {options!r}")
        return next(iter(options.items()))
    if isinstance(options, Sequence) and not isinstance(options, str) and len(options) == 2:
        return options[0], options[1]
    raise ConfigError(f"Promotion {tag!r} expects a pair, got {options!r}")


def parse_promotion(config: Optional[Union[Mapping[str, Any], Promotion]]) -> Promotion:
    """
    Разбирает конфигурацию акции при регистрации товара.

    None, {} и {"none": ...} означают "без акции". Иначе словарь должен
    содержать ровно один тег: get_one_free, package или threshold.
    """
    if isinstance(config, (NoPromotion, GetOneFree, PackageDiscount, ThresholdDiscount)):
        return config
    if config is None:
        return NoPromotion()
    if not isinstance(config, Mapping):
        raise ConfigError(f"Promotion config must be a mapping, got {config!r}")
    if not config:
        return NoPromotion()
    if len(config) != 1:
        raise ConfigError(f"Promotion config must have exactly one tag, got {list(config)!r}")

    tag, options = next(iter(config.items()))
    if tag == "none":
        return NoPromotion()
    if tag == "get_one_free":
        return GetOneFree(options)
    if tag == "package":
        size, percent = _pair(tag, options)
        return PackageDiscount(size, percent)
    if tag == "threshold":
        threshold, percent = _pair(tag, options)
        return ThresholdDiscount(threshold, percent)
    raise ConfigError(f"Unknown promotion: {tag!r}")
