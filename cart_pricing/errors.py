from __future__ import annotations


class PricingError(Exception):
    pass


class ValidationError(PricingError, ValueError):
    """Product data outside the allowed bounds (name length, price range)."""


class ConfigError(PricingError, ValueError):
    """Unrecognized or malformed promotion/coupon configuration."""


class NotFoundError(PricingError, LookupError):
    pass


class InvalidQuantityError(PricingError, ValueError):
    pass


class QuantityLimitError(PricingError, ValueError):
    pass
