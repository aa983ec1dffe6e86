"""
Money Utilities - Safe Decimal operations for monetary values.

Avoids float precision issues by using Decimal throughout. Floats are only
produced at the JSON boundary via ``to_float``.
"""
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation
from typing import Iterable, Union

Numeric = Union[str, int, float, Decimal]

# Default precision for money operations (2 decimal places)
MONEY_PRECISION = Decimal("0.01")

ZERO = Decimal("0")

CURRENCY_SYMBOLS = {
    "PHP": "₱",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def to_decimal(value: Union[Numeric, None]) -> Decimal:
    """
    Convert any value to Decimal safely.

    Args:
        value: Value to convert (str, int, float, Decimal, or None)

    Returns:
        Decimal representation of the value, or Decimal("0") if None/invalid
    """
    if value is None:
        return Decimal("0")

    if isinstance(value, Decimal):
        return value

    try:
        # Go through str so 0.1 stays 0.1
        if isinstance(value, float):
            return Decimal(str(value))
        return Decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return Decimal("0")


def round_money(value: Numeric) -> Decimal:
    """Round monetary value to 2 decimal places (half up)."""
    return to_decimal(value).quantize(MONEY_PRECISION, rounding=ROUND_HALF_UP)


def format_money(value: Numeric, currency: str = "PHP") -> str:
    """
    Format monetary value with currency symbol.

    Args:
        value: Value to format
        currency: Currency code (PHP, USD, EUR, GBP)

    Returns:
        Formatted string, e.g. "₱1,250.00"
    """
    symbol = CURRENCY_SYMBOLS.get(currency)
    formatted = f"{round_money(value):,.2f}"
    if symbol is None:
        return f"{formatted} {currency}"
    return f"{symbol}{formatted}"


def to_float(value: Numeric) -> float:
    """
    Convert Decimal to float for JSON serialization.

    Use only at API boundaries, not for internal calculations.
    """
    return float(to_decimal(value))


def add(a: Numeric, b: Numeric) -> Decimal:
    """Safe addition of monetary values."""
    return to_decimal(a) + to_decimal(b)


def multiply(value: Numeric, factor: Numeric) -> Decimal:
    """Safe multiplication of monetary value by a factor."""
    return to_decimal(value) * to_decimal(factor)


def sum_money(values: Iterable[Numeric]) -> Decimal:
    """Sum monetary values; an empty iterable sums to Decimal("0")."""
    total = ZERO
    for value in values:
        total += to_decimal(value)
    return total
