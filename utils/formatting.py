"""Display formatting for currency, percentages and multipliers."""
from decimal import Decimal, ROUND_HALF_UP


def format_currency(val: float) -> str:
    """Whole-dollar US currency, sign before the symbol: -$1,234

    Halves round away from zero (240.5 -> $241), not to even.
    """
    whole = Decimal(abs(val)).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    sign = "-" if val < 0 and whole != 0 else ""
    return f"{sign}${whole:,.0f}"


def format_percent(val: float, decimals: int = 1) -> str:
    return f"{val:.{decimals}f}%"


def format_multiplier(val: float) -> str:
    return f"{val:.1f}x"


def format_count(val: float) -> str:
    """Whole count truncated toward zero (leads, arches)"""
    return f"{int(val):,}"
