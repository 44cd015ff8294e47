"""Zigzag mapping between signed and unsigned integers.

Non-negative numbers map to even numbers and negative numbers to odd
numbers, so that values of small magnitude stay small once encoded.
"""


def zigzag(value: int) -> int:
    """Map a signed integer onto a non-negative one."""
    if value >= 0:
        return value << 1
    return -(value << 1) - 1


def unzigzag(value: int) -> int:
    """Invert :func:`zigzag`."""
    return (value >> 1) ^ -(value & 1)