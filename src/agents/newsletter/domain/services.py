from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

CRORE = 10_000_000
MILLION = 1_000_000

_MARKDOWN_MARKERS = ("##", "*")
_MAX_FRACTION_DIGITS = Decimal("0.001")
# Wide enough for any finite float written out in full.
_DECIMAL_PRECISION = 400


def _plain_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _to_decimal(value: float) -> Decimal:
    # ints convert exactly; floats go through their shortest repr
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(str(value))


def _precision_for(number: Decimal) -> int:
    return max(_DECIMAL_PRECISION, number.adjusted() + 5)


def _whole(value: float, unit: int) -> str:
    number = _to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = _precision_for(number)
        scaled = number / Decimal(unit)
        return f"{scaled.to_integral_value(rounding=ROUND_HALF_UP):f}"


def _indian_digits(digits: str) -> str:
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups: list[str] = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join([*groups, tail])


def _western_digits(digits: str) -> str:
    groups: list[str] = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)
    return ",".join(groups)


def _grouped(value: float, *, indian: bool) -> str:
    number = _to_decimal(value)
    with localcontext() as ctx:
        ctx.prec = _precision_for(number)
        number = number.quantize(_MAX_FRACTION_DIGITS, rounding=ROUND_HALF_UP)
    sign = "-" if number < 0 else ""
    integer_part, _, fraction = f"{abs(number):f}".partition(".")
    fraction = fraction.rstrip("0")

    if indian:
        grouped = _indian_digits(integer_part)
    else:
        grouped = _western_digits(integer_part)
    if fraction:
        grouped = f"{grouped}.{fraction}"
    if grouped == "0":
        sign = ""
    return f"{sign}{grouped}"


def format_metric(value: float, currency: str) -> str:
    """
    Render a monetary amount for display.

    INR amounts of a crore or more become whole crores, USD amounts of a
    million or more become whole millions; smaller amounts keep full digits
    with locale grouping. Unknown currency tags get the plain number.
    Integers of any size are formatted exactly.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return _plain_number(value)

    tag = currency.strip().lower()
    if tag == "inr":
        if value >= CRORE:
            return f"₹{_whole(value, CRORE)} crores"
        return f"₹{_grouped(value, indian=True)}"
    if tag == "usd":
        if value >= MILLION:
            return f"${_whole(value, MILLION)}M"
        return f"${_grouped(value, indian=False)}"
    return _plain_number(value)


def detect_markdown(text: str) -> bool:
    return any(marker in text for marker in _MARKDOWN_MARKERS)
