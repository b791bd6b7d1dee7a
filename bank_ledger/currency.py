"""
Money Helpers Module

Decimal coercion, parsing and display formatting for ledger amounts.
NEVER uses float for monetary values: every amount entering the ledger is
converted to Decimal through its string form.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, getcontext
from typing import Union
import re

# Set global decimal context for financial precision
getcontext().prec = 28

ZERO = Decimal('0')
CENT = Decimal('0.01')

AmountLike = Union[Decimal, int, float, str]


def to_decimal(value: AmountLike) -> Decimal:
    """
    Convert a numeric value to Decimal without float artefacts

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Decimal value

    Raises:
        ValueError: If value is not numeric
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Cannot convert {value!r} to Decimal")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Cannot convert {value!r} to Decimal")


def round_to_cents(value: Decimal) -> Decimal:
    """Round to two decimal places, half up"""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal, symbol: str = "$") -> str:
    """
    Format for display, e.g. ``$1,234.50`` or ``-$235.00``

    Display only: balances themselves are never quantized.
    """
    rounded = round_to_cents(value)
    sign = "-" if rounded < ZERO else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"


def format_rate(rate: Decimal) -> str:
    """Format an annual rate as a percentage, e.g. ``2.50%``"""
    return f"{round_to_cents(rate * 100):.2f}%"


def decimal_from_string(value: str) -> Decimal:
    """
    Safely convert string to Decimal, handling common formats

    Args:
        value: String representation of number

    Returns:
        Decimal value

    Raises:
        ValueError: If string cannot be converted to valid Decimal
    """
    if not value or not isinstance(value, str):
        raise ValueError("Value must be a non-empty string")

    # Remove currency symbols and whitespace
    clean_value = re.sub(r'[^\d.,\-+]', '', value.strip())

    # Handle comma as decimal separator (European format)
    if ',' in clean_value and '.' in clean_value:
        # Both comma and dot - assume comma is thousands separator
        clean_value = clean_value.replace(',', '')
    elif ',' in clean_value and clean_value.count(',') == 1:
        parts = clean_value.split(',')
        if len(parts[1]) <= 2:  # Likely decimal separator
            clean_value = clean_value.replace(',', '.')
        else:  # Likely thousands separator
            clean_value = clean_value.replace(',', '')
    elif ',' in clean_value:
        clean_value = clean_value.replace(',', '')

    try:
        result = Decimal(clean_value)
    except InvalidOperation:
        raise ValueError(f"Cannot convert '{value}' to Decimal")

    if not result.is_finite():
        raise ValueError(f"Cannot convert '{value}' to Decimal")
    return result
