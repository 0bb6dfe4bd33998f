# app/utils/money.py

import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

Money = Decimal

CENTS = Decimal(100)

def D(x) -> Money:
    return x if isinstance(x, Decimal) else Decimal(str(x or "0"))

def parse_amount(x) -> Money | None:
    """Parse a request amount (number or numeric string); None if not a finite number."""
    if isinstance(x, bool):
        return None
    if isinstance(x, float) and not math.isfinite(x):
        return None
    try:
        value = Decimal(str(x).strip())
    except (InvalidOperation, ValueError):
        return None
    return value if value.is_finite() else None

def round_money(x: Money) -> Money:
    return D(x).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

def to_minor_units(x: Money) -> int:
    # half-up, clamped at zero
    cents = (D(x) * CENTS).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return max(0, int(cents))

# Stripe caps unit_amount at eight digits
MAX_UNIT_AMOUNT = 99_999_999

def from_minor_units(cents) -> Money:
    return D(cents) / CENTS

def format_usd(x: Money) -> str:
    return f"${round_money(x):,.2f}"

def to_string_money(x) -> str:
    return str(D(x))

def to_json_number(x: Money):
    """Plain JSON number: 180 instead of "180.00", 75.5 instead of "75.50"."""
    value = D(x).normalize()
    if value == value.to_integral_value():
        return int(value)
    return float(value)
