"""
Secret masking for log output.

    >>> mask_secret("secretpw")
    'se**********pw'
"""

from __future__ import annotations

MASK = "**********"


def mask_secret(secret: str) -> str:
    """
    Return a display-safe preview of `secret`.

    Four or more characters show the first two and last two. Three characters
    show the first and last, two show only the first. Anything shorter shows
    nothing but the mask.
    """
    length = len(secret)
    if length >= 4:
        return f"{secret[:2]}{MASK}{secret[-2:]}"
    if length == 3:
        return f"{secret[0]}{MASK}{secret[-1]}"
    if length == 2:
        return f"{secret[0]}{MASK}"
    return MASK


__all__ = ["MASK", "mask_secret"]
