from __future__ import annotations
import re
from decimal import Decimal, InvalidOperation, MAX_PREC, ROUND_HALF_UP, localcontext

# interpreter default for int() on strings (sys.int_max_str_digits)
MAX_UNIT_DIGITS = 4300

def parse_units(s: str) -> int | None:
    # thousands separators: 1,234,567
    s = re.sub(r"[\s,]+", "", s)
    if not s.isdigit() or len(s) > MAX_UNIT_DIGITS:
        return None
    try:
        return int(s)
    except ValueError:
        return None

def parse_percent(s: str) -> Decimal | None:
    s = s.strip()
    try:
        val = Decimal(s)
    except InvalidOperation:
        return None
    if not val.is_finite():
        return None
    return val

def percentage_share(part: int, total: int, places: int = 2) -> Decimal:
    """
    Share of `part` in `total` as a percentage, rounded half away from zero
    to `places` decimals, the way the report itself displays percentages.
    Raises ZeroDivisionError when total is 0; callers decide the policy.
    """
    if total == 0:
        raise ZeroDivisionError("percentage share of a zero total")
    num = Decimal(part)
    with localcontext() as ctx:
        # room for every integer digit of the share plus `places` decimals
        ctx.prec = max(num.adjusted(), 0) + places + 30
        exact = num * 100 / Decimal(total)
        return exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)

def within_tolerance(calculated: Decimal, reported: Decimal, tolerance: Decimal) -> bool:
    with localcontext() as ctx:
        # subtraction of finite decimals is exact at MAX_PREC
        ctx.prec = MAX_PREC
        return abs(calculated - reported) <= tolerance
