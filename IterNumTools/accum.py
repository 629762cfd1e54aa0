"""
Sums and products that stop at the first missing or failed element.
"""
import operator
from typing import Any, Callable, Iterable


def _fold(iterable: Iterable, start, op: Callable[[Any, Any], Any]):
    acc = start
    for value in iterable:
        if value is None:
            return None
        if isinstance(value, Exception):
            return value
        acc = op(acc, value)
    return acc

def sum2(iterable: Iterable, start=0):
    """
    Sums the elements of `iterable` in a single pass.

    A `None` element means a value is missing: the result is None and no more
    elements are consumed. An exception instance element means a value failed
    to compute: that exception is returned (not raised), again without
    consuming the rest.

    Examples:
        >>> sum2([1, 2, 3, 4])
        10
        >>> sum2([None, 2, 3]) is None
        True
    """
    return _fold(iterable, start, operator.add)

def product2(iterable: Iterable, start=1):
    """Multiplies the elements of `iterable`, with the short-circuiting of `sum2`."""
    return _fold(iterable, start, operator.mul)
