"""Utility functions for the Letter Boxed solver."""

from math import perm

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"


def count_permutations(n: int, k: int) -> int:
    """Return the number of ordered selections of `k` items out of `n`, i.e. n! / (n - k)!.

    Returns 0 if `k` is negative or larger than `n`.
    """
    if k < 0 or k > n:
        return 0
    return perm(n, k)


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators."""
    return f"{n:,}"
