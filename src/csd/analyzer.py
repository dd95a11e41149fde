"""
CSD Analyzer: read-only diagnostics for a CSD string.

This module provides lightweight analysis of a CSD string:
    - Digit inventory (integral, fractional, non-zero)
    - Canonical form check (no two adjacent non-zero digits)
    - Repeated digit pattern (sub-expression sharing candidate)
    - Decoded value
    - Warning flags

IMPORTANT: This module does NOT re-encode or fix the input.
It only produces reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from csd.decoder import to_decimal
from csd.lcsre import longest_repeated_substring


@dataclass
class CsdReport:
    """Analysis report for a single CSD string."""

    csd: str
    value: float = 0.0
    length: int = 0

    # Digit inventory
    integral_digits: int = 0
    fractional_digits: int = 0
    nonzero_digits: int = 0
    highest_power: Optional[int] = None

    # Structure
    is_canonical: bool = True
    repeated_pattern: str = ""

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def count_nonzeros(csd: str) -> int:
    """Number of '+' and '-' digits."""
    return csd.count("+") + csd.count("-")


def _adjacent_nonzeros(digits: str) -> List[int]:
    """Indexes i where digits[i] and digits[i + 1] are both non-zero."""
    return [
        i for i in range(len(digits) - 1)
        if digits[i] in "+-" and digits[i + 1] in "+-"
    ]


def is_canonical(csd: str) -> bool:
    """
    True if no two adjacent digits are both non-zero.

    The radix point does not separate digits: "+.+" is not canonical.
    """
    return not _adjacent_nonzeros(csd.replace(".", ""))


def analyze_csd(csd: str) -> CsdReport:
    """
    Analyze a CSD string.

    Raises:
        InvalidDigit: If csd contains characters outside the CSD alphabet
    """
    # Decoding first validates the alphabet
    value = to_decimal(csd)

    integral, _, fractional = csd.partition(".")
    digits = integral + fractional

    report = CsdReport(csd=csd, value=value, length=len(digits))
    report.integral_digits = len(integral)
    report.fractional_digits = len(fractional)
    report.nonzero_digits = count_nonzeros(csd)
    if integral:
        report.highest_power = len(integral) - 1

    adjacent = _adjacent_nonzeros(digits)
    report.is_canonical = not adjacent
    report.repeated_pattern = longest_repeated_substring(digits)

    if adjacent:
        report.add_warning(
            f"Not canonical: adjacent non-zero digits at position(s) "
            f"{', '.join(str(i) for i in adjacent)}"
        )

    if len(integral) > 1 and integral[0] == "0":
        report.add_warning(f"Leading zero in integral part: {integral}")

    if len(report.repeated_pattern) >= 2 and count_nonzeros(report.repeated_pattern) >= 2:
        report.add_warning(
            f"Repeated pattern {report.repeated_pattern!r} can be shared"
        )

    return report
