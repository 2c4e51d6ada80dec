"""
Rough strength hint for a password configuration.

The estimate is advisory display text. It never decides whether a password
is generated.
"""

import math


def _bits_per_char(class_count: int) -> float:
    if class_count >= 4:
        return 6.5
    if class_count == 3:
        return 6.0
    if class_count == 2:
        return 5.0
    return 4.7


def estimate_bits(length: int, class_count: int) -> int:
    """
    Estimate entropy in bits from length and number of character classes.

    Args:
        length: Password length
        class_count: Number of selected character classes

    Returns:
        Estimated bits, 0 for degenerate input
    """
    if length <= 0 or class_count <= 0:
        return 0
    # Halves round up
    return int(math.floor(length * _bits_per_char(class_count) + 0.5))


def estimate_strength(length: int, class_count: int) -> str:
    """
    Bucket the entropy estimate into a human-readable label.

    Args:
        length: Password length
        class_count: Number of selected character classes

    Returns:
        Label such as "Strong (~78 bits)"
    """
    bits = estimate_bits(length, class_count)

    if bits >= 90:
        return f"Very strong (~{bits} bits)"
    if bits >= 70:
        return f"Strong (~{bits} bits)"
    if bits >= 50:
        return f"Okay (~{bits} bits)"
    return f"Weak (< {max(40, bits)} bits)"
