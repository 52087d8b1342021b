"""Money helpers.

Prices live as integer minor units (cents) everywhere inside the cart. Text
only appears at the edge: `format_amount` / `format_price` for display and
`parse_amount` / `to_minor_units` for input.
"""

from decimal import Decimal, Inexact, InvalidOperation, localcontext

from .config import CURRENCY_SYMBOL

MINOR_DIGITS = 2
MINOR_PER_MAJOR = 10 ** MINOR_DIGITS


def to_minor_units(value) -> int:
    """Convert a major-unit amount ("4.99", 4.99, Decimal) to cents, exactly."""
    if isinstance(value, bool):
        raise ValueError(f"not an amount: {value!r}")
    if isinstance(value, float):
        # repr of a float is its shortest round-tripping decimal form
        value = repr(value)
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise ValueError(f"not an amount: {value!r}") from None
    if not amount.is_finite():
        raise ValueError(f"not an amount: {value!r}")

    # enough precision for every digit of the input, and any rounding is an error
    with localcontext() as ctx:
        ctx.prec = len(amount.as_tuple().digits) + 3
        ctx.traps[Inexact] = True
        try:
            minor = amount.scaleb(MINOR_DIGITS)
            whole = minor.to_integral_value()
        except ArithmeticError:
            raise ValueError(f"amount out of range: {value!r}") from None
    if minor != whole:
        raise ValueError(f"more than two decimal places: {value!r}")
    return int(whole)


def _split(minor: int) -> tuple[str, int, int]:
    sign = "-" if minor < 0 else ""
    units, cents = divmod(abs(minor), MINOR_PER_MAJOR)
    return sign, units, cents


def format_amount(minor: int) -> str:
    """Two-decimal string, e.g. 998 -> "9.98"."""
    sign, units, cents = _split(minor)
    return f"{sign}{units}.{cents:02d}"


def format_price(minor: int, symbol: str = CURRENCY_SYMBOL) -> str:
    """Display string with currency symbol and thousands separator."""
    sign, units, cents = _split(minor)
    return f"{sign}{symbol}{units:,}.{cents:02d}"


def parse_amount(text: str, symbol: str = CURRENCY_SYMBOL) -> int:
    """Inverse of `format_amount` and `format_price`: back to minor units."""
    cleaned = text.strip().replace(",", "")
    sign = ""
    if cleaned.startswith("-"):
        sign, cleaned = "-", cleaned[1:]
    if symbol and cleaned.startswith(symbol):
        cleaned = cleaned[len(symbol):]
    return to_minor_units(sign + cleaned)
