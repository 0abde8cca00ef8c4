"""Conversions between human decimal amounts and atomic token units."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

# Enough precision for uint256 values scaled by up to 18 decimals
_PRECISION = 96


def parse_units(amount: Union[str, int, Decimal], decimals: int) -> int:
    """Convert a human amount (``"0.1"``) into atomic units.

    Raises ``ValueError`` for malformed or negative amounts and for amounts
    with more fractional digits than the token supports.
    """

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValueError(f"Invalid amount: {amount!r}") from exc
        if not value.is_finite() or value < 0:
            raise ValueError(f"Invalid amount: {amount!r}")
        scaled = value.scaleb(decimals)
        if scaled != scaled.to_integral_value():
            raise ValueError(f"Amount {amount} has more than {decimals} decimal places")
        return int(scaled)


def format_units(raw: Union[str, int], decimals: int) -> str:
    """Render an atomic amount as a decimal string with trailing zeros trimmed."""

    with localcontext() as ctx:
        ctx.prec = _PRECISION
        try:
            value = Decimal(int(str(raw))).scaleb(-decimals)
        except (InvalidOperation, ValueError) as exc:
            raise ValueError(f"Invalid atomic amount: {raw!r}") from exc
        text = format(value, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text or "0"


__all__ = ["parse_units", "format_units"]
