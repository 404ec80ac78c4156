"""Money helpers.

All prices in the engine are ``Decimal`` so that sums such as
3 × 0.26 come out as exactly 0.78 and threshold comparisons against
the cart minimum are never thrown off by binary floating point.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

MoneyLike = Union[Decimal, int, float, str]

ZERO = Decimal("0")
CENT = Decimal("0.01")


def to_money(value: MoneyLike) -> Decimal:
    """
    Coerce a price value to ``Decimal``.

    Floats go through ``str()`` first so ``0.26`` becomes ``Decimal("0.26")``
    rather than its binary expansion.

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Decimal amount

    Raises:
        ValueError: If value is not numeric or not finite
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid price: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"Invalid price: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"Invalid price: {value!r}")
    return amount


def format_price(amount: MoneyLike) -> str:
    """
    Format an amount for display, e.g. ``$5.69``.

    Example:
        >>> format_price(Decimal("1.3"))
        '$1.30'
    """
    value = to_money(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    return f"${value:.2f}"
