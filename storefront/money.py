"""
Money Utilities - integer minor-unit arithmetic for prices.

Prices never pass through float: every amount is an int count of the
currency's smallest unit.
"""

from typing import Iterable

from storefront.config import CURRENCY


def _check_non_negative(value: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer")
    if value < 0:
        raise ValueError(f"{name} must be non-negative")
    return value


def line_total(unit_price: int, quantity: int) -> int:
    """Price of `quantity` units at `unit_price` minor units each."""
    _check_non_negative(unit_price, "unit_price")
    _check_non_negative(quantity, "quantity")
    return unit_price * quantity


def sum_minor(amounts: Iterable[int]) -> int:
    """Sum minor-unit amounts; 0 for an empty iterable."""
    return sum((_check_non_negative(a, "amount") for a in amounts), 0)


def format_money(amount: int, currency: str = CURRENCY) -> str:
    """
    Format a minor-unit amount for display.

    Args:
        amount: Amount in minor units
        currency: Currency code shown before the amount

    Returns:
        e.g. "SAR 249" or "SAR 1,245"
    """
    _check_non_negative(amount, "amount")
    return f"{currency} {amount:,}"


__all__ = ["line_total", "sum_minor", "format_money"]
