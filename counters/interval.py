"""Sampling interval extraction from the counter Series tag"""
import re

INTERVAL_PREFIX = "Interval="

_INT_PATTERN = re.compile(r"^\s*[+-]?[0-9]+\s*$")
_INT32_MIN = -2 ** 31
_INT32_MAX = 2 ** 31 - 1


def get_interval(series: str) -> int:
    """Return the interval encoded in a ``Interval=<n>`` series tag, or 0"""
    if not series[:len(INTERVAL_PREFIX)].lower() == INTERVAL_PREFIX.lower():
        return 0

    remainder = series[len(INTERVAL_PREFIX):]
    if not _INT_PATTERN.match(remainder):
        return 0

    interval = int(remainder)
    if interval < _INT32_MIN or interval > _INT32_MAX:
        return 0
    return interval
