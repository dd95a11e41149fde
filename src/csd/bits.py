"""Bit helpers used by the integer encoder."""

from csd.errors import InvalidArgument


def highest_power_of_two_in(x: int) -> int:
    """
    Return the highest power of two that is less than or equal to x.

    Examples:
        highest_power_of_two_in(1)  == 1
        highest_power_of_two_in(42) == 32
        highest_power_of_two_in(64) == 64

    Raises:
        InvalidArgument: If x < 1
    """
    if x < 1:
        raise InvalidArgument(f"highest_power_of_two_in requires x >= 1, got {x}")
    return 1 << (x.bit_length() - 1)
