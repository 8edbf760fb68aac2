"""Numeric hygiene shared by the models and the pricing pipeline.

Catalog and selection data arrive from loosely typed sources (CMS records,
form fields). Amounts that are missing, non-numeric, non-finite or negative
are treated as zero instead of failing validation; the resolver then reports
the gap through the line status.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext


def coerce_amount(value: object) -> float:
    """Coerce a price, rate or dimension to a non-negative float.

    >>> coerce_amount("250")
    250.0
    >>> coerce_amount(None), coerce_amount("abc"), coerce_amount(-5)
    (0.0, 0.0, 0.0)
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0.0
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def coerce_quantity(value: object) -> int:
    """Coerce a quantity to an integer of at least 1."""
    amount = coerce_amount(value)
    return max(1, int(amount))


def round_half_up(value: float) -> float:
    """Round to the nearest whole currency unit, halves away from zero.

    Python's ``round`` uses banker's rounding (``round(2.5) == 2``), which
    does not match how estimates are printed. Non-finite values are returned
    unchanged.
    """
    if not math.isfinite(value):
        return value
    amount = Decimal(repr(value))
    with localcontext() as ctx:
        # Enough digits to hold every integer digit of the amount.
        ctx.prec = max(ctx.prec, amount.adjusted() + 2)
        return float(amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
