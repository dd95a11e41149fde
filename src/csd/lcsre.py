"""
Longest repeated non-overlapping substring.

Used to spot digit patterns that occur twice in a CSD string, e.g.
"+-00+-00+-00+-0" repeats "+-00+-0". In a constant multiplier such a
pattern can be computed once and shifted.
"""

from typing import Optional

from csd.errors import InvalidArgument


def longest_repeated_substring(sv: str, n: Optional[int] = None) -> str:
    """
    Return the longest substring that occurs twice without overlapping.

    Dynamic program over end positions i < j: the cell (i, j) holds the
    length of the common suffix of sv[:i] and sv[:j], capped so that the
    two occurrences cannot overlap (length < j - i). Only the previous row
    is needed, so two rows of n + 1 cells are kept.

    Ties go to the candidate found first (smallest end index).

    Example:
        longest_repeated_substring("banana") == "an"
        longest_repeated_substring("abcdefghijklmno") == ""

    Args:
        sv: Input string
        n: Length of sv (defaults to len(sv))

    Returns:
        The substring, or an empty string if nothing repeats

    Raises:
        InvalidArgument: If sv is None or n does not match len(sv)
    """
    if sv is None:
        raise InvalidArgument("longest_repeated_substring requires a string, got None")
    if n is None:
        n = len(sv)
    elif n != len(sv):
        raise InvalidArgument(f"length mismatch: n={n} but len(sv)={len(sv)}")

    prev = [0] * (n + 1)
    curr = [0] * (n + 1)
    res_length = 0
    index = 0

    for i in range(1, n + 1):
        for j in range(i + 1, n + 1):
            if sv[i - 1] == sv[j - 1] and prev[j - 1] < j - i:
                curr[j] = prev[j - 1] + 1
                if curr[j] > res_length:
                    res_length = curr[j]
                    index = i
            else:
                curr[j] = 0
        prev, curr = curr, prev

    return sv[index - res_length:index]
