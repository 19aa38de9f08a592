"""Case-insensitive substring matching."""

from typing import Optional


def normalize(text: str) -> str:
    """Lower-case ``text``. No locale-specific folding."""
    return text.lower()


def matches(haystack: Optional[str], needle: str) -> bool:
    """True if ``haystack`` contains ``needle``, ignoring case.

    ``needle`` is trimmed first. A missing or empty haystack never matches;
    rejecting an empty needle is up to the caller.
    """
    if not haystack or not isinstance(haystack, str):
        return False
    return normalize(needle.strip()) in normalize(haystack)


def any_matches(values, needle: str) -> bool:
    return any(matches(value, needle) for value in values)
