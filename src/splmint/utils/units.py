"""
Conversion between human-readable token amounts and raw base units.

A mint with ``decimals = d`` stores every balance as an integer count of
``10**-d`` units. All conversions go through ``decimal.Decimal`` so that
``1.1`` tokens with 6 decimals becomes exactly ``1100000``.
"""
from __future__ import annotations
from decimal import Decimal, InvalidOperation, localcontext

def _check_decimals(decimals: int) -> None:
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

def make_integer(amount: float | int | str | Decimal, decimals: int) -> int:
    """Scale ``amount`` into raw units of a mint with ``decimals`` decimals.

    Raises ValueError for malformed or negative amounts and amounts finer than the mint allows.
    """
    _check_decimals(decimals)
    if isinstance(amount, bool):
        raise ValueError(f"invalid amount {amount!r}")
    try:
        value = Decimal(str(amount)) if not isinstance(amount, Decimal) else amount
    except InvalidOperation as e:
        raise ValueError(f"invalid amount {amount!r}") from e
    if not value.is_finite():
        raise ValueError(f"amount must be finite, got {amount}")
    if value < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")
    # scaleb rounds to context precision; keep every digit of the coefficient
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + 1)
        scaled = value.scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise ValueError(f"amount {amount} has more than {decimals} fractional digits")
    return int(scaled)

def make_decimal(raw: int, decimals: int) -> float:
    """Scale a raw integer amount back into token units."""
    _check_decimals(decimals)
    return float(Decimal(int(raw)).scaleb(-decimals))
