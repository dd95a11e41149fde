"""
CSD Encoder (decimal -> Canonical Signed Digit string).

CSD representation example:

    Decimal: 28.5 = 11100.1
    CSD:     +00-00.+ = 2^5 - 2^2 + 2^-1 = 32 - 4 + 0.5 = 28.5

    '+' is +1
    '-' is -1
    '0' is  0

All encoders walk the digit positions from the most significant one down,
comparing 1.5 times the remaining value (3 times, for the integer
variants) against the current power of two. That threshold is what picks
the canonical digit: no two adjacent non-zero digits, minimum non-zero
count. This holds for integers and for |x| >= 1. Below one the float
encoders start at 2**0, which can be too small, so the first fractional
digits may repeat: to_csd(0.75, 4) == "0.++00".

Two budgets are supported:
    - places: number of fractional digits to emit (to_csd)
    - nnz: maximum number of non-zero digits (to_csdnnz, to_csdnnz_i)
"""

import logging
import math
from typing import List, Tuple

from csd.bits import highest_power_of_two_in
from csd.errors import InvalidArgument


logger = logging.getLogger(__name__)


def _check_nnz(nnz: int) -> None:
    if nnz < 1:
        raise InvalidArgument(f"nnz must be at least 1, got {nnz}")


def _initial_exponent(value: float) -> Tuple[int, List[str]]:
    """Starting exponent and digit buffer shared by the float encoders."""
    if abs(value) >= 1.0:
        return int(math.ceil(math.log2(abs(value) * 1.5))), []
    return 0, ["0"]


def _emit_digits(value: float, p2n: float, rem: int, stop: int,
                 digits: List[str]) -> Tuple[float, float, int]:
    """Emit one digit per exponent while rem > stop."""
    while rem > stop:
        p2n /= 2.0
        rem -= 1
        det = 1.5 * value
        if det > p2n:
            digits.append("+")
            value -= p2n
        elif det < -p2n:
            digits.append("-")
            value += p2n
        else:
            digits.append("0")
    return value, p2n, rem


def to_csd(decimal_value: float, places: int) -> str:
    """
    Convert a number to a CSD string with a fixed number of fractional places.

    Example:
        to_csd(28.5, 2) == "+00-00.+0"
        to_csd(-0.5, 2) == "0.-0"
        to_csd(0.0, 0)  == "0."

    Args:
        decimal_value: Value to convert
        places: Number of digits to emit after the point

    Returns:
        CSD string, always containing a '.'

    Raises:
        InvalidArgument: If places < 0
    """
    if places < 0:
        raise InvalidArgument(f"places must be non-negative, got {places}")

    rem, digits = _initial_exponent(decimal_value)
    p2n = 2.0 ** rem

    value, p2n, rem = _emit_digits(decimal_value, p2n, rem, 0, digits)
    digits.append(".")
    _emit_digits(value, p2n, rem, -places, digits)

    csd = "".join(digits)
    logger.debug("to_csd(%r, %d) -> %s", decimal_value, places, csd)
    return csd


def to_csdnnz(decimal_value: float, nnz: int) -> str:
    """
    Convert a number to a CSD string with at most nnz non-zero digits.

    Conversion stops as soon as the budget is spent or the value is
    represented exactly; integral positions are always padded with '0'
    so the leading digit keeps its weight. A '.' is only emitted when
    fractional digits follow.

    Example:
        to_csdnnz(28.5, 4) == "+00-00.+"
        to_csdnnz(28.5, 2) == "+00-00"
        to_csdnnz(28.5, 1) == "+00000"

    Raises:
        InvalidArgument: If nnz < 1
    """
    _check_nnz(nnz)

    rem, digits = _initial_exponent(decimal_value)
    p2n = 2.0 ** rem
    value = decimal_value
    budget = nnz

    while rem > 0 or (budget > 0 and abs(value) > 1e-100):
        if rem == 0:
            digits.append(".")
        p2n /= 2.0
        rem -= 1
        det = 1.5 * value
        if det > p2n:
            digits.append("+")
            value -= p2n
            budget -= 1
        elif det < -p2n:
            digits.append("-")
            value += p2n
            budget -= 1
        else:
            digits.append("0")
        if budget == 0:
            value = 0.0

    csd = "".join(digits)
    logger.debug("to_csdnnz(%r, %d) -> %s", decimal_value, nnz, csd)
    return csd


# Name used by the command line flag (--to_csdfixed).
to_csdfixed = to_csdnnz


def _integer_digits(decimal_value: int, nnz: int = -1) -> str:
    """
    Shared loop of the integer encoders.

    A negative nnz means no budget.
    """
    if decimal_value == 0:
        return "0"

    p2n = highest_power_of_two_in(abs(decimal_value) * 3 // 2) * 2
    digits: List[str] = []

    while p2n > 1:
        p2n_half = p2n >> 1
        det = 3 * decimal_value
        if det > p2n:
            digits.append("+")
            decimal_value -= p2n_half
            nnz -= 1
        elif det < -p2n:
            digits.append("-")
            decimal_value += p2n_half
            nnz -= 1
        else:
            digits.append("0")
        p2n = p2n_half
        if nnz == 0:
            decimal_value = 0

    return "".join(digits)


def to_csd_i(decimal_value: int) -> str:
    """
    Convert an integer to a CSD string (no point, no fractional part).

    Example:
        to_csd_i(28) == "+00-00"
        to_csd_i(0)  == "0"
    """
    csd = _integer_digits(decimal_value)
    logger.debug("to_csd_i(%d) -> %s", decimal_value, csd)
    return csd


def to_csdnnz_i(decimal_value: int, nnz: int) -> str:
    """
    Convert an integer to a CSD string with at most nnz non-zero digits.

    Once the budget is spent the remaining positions are filled with '0',
    so the string keeps the full width of the unbounded encoding.

    Example:
        to_csdnnz_i(158, 2) == "+0+00000"

    Raises:
        InvalidArgument: If nnz < 1
    """
    _check_nnz(nnz)
    csd = _integer_digits(decimal_value, nnz)
    logger.debug("to_csdnnz_i(%d, %d) -> %s", decimal_value, nnz, csd)
    return csd
