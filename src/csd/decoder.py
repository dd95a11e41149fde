"""
CSD Decoder (Canonical Signed Digit string -> decimal).

The decoder accepts any string over the CSD alphabet; canonical form is
not checked.

    Integral part:   '0' -> n = 2n
                     '+' -> n = 2n + 1
                     '-' -> n = 2n - 1
                     stops at '.' or end of string

    Fractional part: weights 1/2, 1/4, 1/8, ... after the '.'

Integral parts too large for a double decode to +inf or -inf.

Two full decoders exist with identical results:
    - to_decimal: if/elif chain over the digit
    - to_decimal_using_switch: table dispatch, kept as a benchmark target
"""

import math
from typing import Callable, Dict, Tuple

from csd.errors import InvalidDigit


def _as_float(integral: int) -> float:
    """Integral part as a float; beyond double range it saturates to +-inf."""
    try:
        return float(integral)
    except OverflowError:
        return math.copysign(math.inf, integral)


def to_decimal_integral(csd: str, pos: int = 0) -> Tuple[int, int]:
    """
    Decode the integral part of a CSD string starting at pos.

    Returns:
        (value, index of the terminating '.' or len(csd))

    Raises:
        InvalidDigit: On any character outside {'+', '-', '0', '.'}
    """
    num = 0
    end = len(csd)
    while pos < end:
        digit = csd[pos]
        if digit == "0":
            num = 2 * num
        elif digit == "+":
            num = 2 * num + 1
        elif digit == "-":
            num = 2 * num - 1
        elif digit == ".":
            break
        else:
            raise InvalidDigit(digit, pos)
        pos += 1
    return num, pos


def to_decimal_fractional(csd: str, pos: int) -> float:
    """
    Decode the fractional part of a CSD string.

    pos must index the '.' that starts the fractional part.

    Raises:
        InvalidDigit: On any character outside {'+', '-', '0'}
    """
    num = 0.0
    scale = 0.5
    for pos in range(pos + 1, len(csd)):
        digit = csd[pos]
        if digit == "0":
            pass
        elif digit == "+":
            num += scale
        elif digit == "-":
            num -= scale
        else:
            raise InvalidDigit(digit, pos)
        scale /= 2
    return num


def to_decimal(csd: str) -> float:
    """
    Convert a CSD string to a float.

    Example:
        to_decimal("+00-00.+") == 28.5
        to_decimal("0.-")      == -0.5
    """
    integral, pos = to_decimal_integral(csd)
    if pos == len(csd):
        return _as_float(integral)
    return _as_float(integral) + to_decimal_fractional(csd, pos)


def to_decimal_i(csd: str) -> int:
    """
    Convert a CSD string to an int.

    Any fractional part is ignored: to_decimal_i("+00-00.00+") == 28.
    """
    integral, _ = to_decimal_integral(csd)
    return integral


_INTEGRAL_STEP: Dict[str, Callable[[int], int]] = {
    "0": lambda n: 2 * n,
    "+": lambda n: 2 * n + 1,
    "-": lambda n: 2 * n - 1,
}

_FRACTIONAL_STEP: Dict[str, Callable[[float, float], float]] = {
    "0": lambda n, scale: n,
    "+": lambda n, scale: n + scale,
    "-": lambda n, scale: n - scale,
}


def to_decimal_using_switch(csd: str) -> float:
    """Table-dispatched twin of to_decimal; results are bit-identical."""
    integral = 0
    pos = 0
    end = len(csd)
    while pos < end and csd[pos] != ".":
        step = _INTEGRAL_STEP.get(csd[pos])
        if step is None:
            raise InvalidDigit(csd[pos], pos)
        integral = step(integral)
        pos += 1

    if pos == end:
        return _as_float(integral)

    fraction = 0.0
    scale = 0.5
    for pos in range(pos + 1, end):
        step = _FRACTIONAL_STEP.get(csd[pos])
        if step is None:
            raise InvalidDigit(csd[pos], pos)
        fraction = step(fraction, scale)
        scale /= 2
    return _as_float(integral) + fraction
