from __future__ import annotations

"""
Case-Insensitive Name Matching.
"""

from typing import Any


def is_match(a: Any, b: Any) -> bool:
    """
    Check if two names are equal under any combination of upper-casing.

    Matches when the strings are identical, when either one's uppercase form
    equals the other verbatim, or when both uppercase forms are equal.
    Non-string operands never match.

    Args:
        a: First name.
        b: Second name.

    Returns:
        bool: True if the names match ignoring letter case.
    """
    if not isinstance(a, str) or not isinstance(b, str):
        return False

    if a == b:
        return True

    upper_a = a.upper()
    if upper_a == b:
        return True

    upper_b = b.upper()
    return a == upper_b or upper_a == upper_b
