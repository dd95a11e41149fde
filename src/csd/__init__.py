"""
Canonical Signed Digit (CSD) Package

Converts numbers to and from CSD strings over the alphabet {'+', '-', '0', '.'}:

    '+' is +1
    '-' is -1
    '0' is  0

    Decimal: 28.5 = 11100.1
    CSD:     +00-00.+ = 2^5 - 2^2 + 2^-1

Also finds the longest repeated non-overlapping substring of a string,
used to spot shareable digit patterns.

All functions are pure: no global state, safe to call from any thread.
"""

__version__ = "1.0.0"

from csd.errors import CsdError, InvalidArgument, InvalidDigit
from csd.bits import highest_power_of_two_in
from csd.encoder import to_csd, to_csd_i, to_csdfixed, to_csdnnz, to_csdnnz_i
from csd.decoder import (
    to_decimal,
    to_decimal_fractional,
    to_decimal_i,
    to_decimal_integral,
    to_decimal_using_switch,
)
from csd.lcsre import longest_repeated_substring
from csd.analyzer import CsdReport, analyze_csd, count_nonzeros, is_canonical

__all__ = [
    "CsdError",
    "InvalidArgument",
    "InvalidDigit",
    "highest_power_of_two_in",
    "to_csd",
    "to_csd_i",
    "to_csdfixed",
    "to_csdnnz",
    "to_csdnnz_i",
    "to_decimal",
    "to_decimal_fractional",
    "to_decimal_i",
    "to_decimal_integral",
    "to_decimal_using_switch",
    "longest_repeated_substring",
    "CsdReport",
    "analyze_csd",
    "count_nonzeros",
    "is_canonical",
]
