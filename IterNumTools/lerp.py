"""
Linear interpolation between two intervals.
"""
import operator
from typing import Any, Callable, Iterable, Tuple

from .space import Space, SpaceError

def lerp_fn(source: Tuple[Any, Any], target: Tuple[Any, Any]) -> Callable[[Any], Any]:
    """
    Creates a function mapping `source` linearly onto `target`.

    Inputs outside of `source` are extrapolated.

    Args:
        source: The (start, end) of the input interval.
        target: The (start, end) of the output interval.

    Raises:
        SpaceError: If the input interval is empty.

    Examples:
        >>> f = lerp_fn((0.0, 2.0), (20.0, 21.0))
        >>> f(1.0), f(-1.0)
        (20.5, 19.5)
    """
    x0, x1 = source
    y0, y1 = target
    if x1 == x0:
        raise SpaceError(f"cannot interpolate from the empty interval ({x0}, {x1})")

    def lerp(x):
        return (y0 * (x1 - x) + y1 * (x - x0)) / (x1 - x0)

    return lerp

def lerp_index_fn(source: Tuple[int, int], target: Tuple[Any, Any]) -> Callable[[int], Any]:
    """
    Like `lerp_fn`, for integer inputs such as step indices.

    Examples:
        >>> f = lerp_index_fn((0, 2), (20.0, 21.0))
        >>> f(1), f(3)
        (20.5, 21.5)
    """
    x0, x1 = (operator.index(x) for x in source)
    f = lerp_fn((x0, x1), target)

    def lerp(x: int):
        return f(operator.index(x))

    return lerp

def lerp_iter(source, target, over: Iterable):
    """
    Maps every value of `over` through `lerp_fn(source, target)`.

    A `Space` stays a `Space`, so the result can still be reversed and measured.
    """
    f = lerp_fn(source, target)
    if isinstance(over, Space):
        return over.map(f)
    return map(f, over)

def lerp_index_iter(source, target, over: Iterable):
    """Maps every integer of `over` through `lerp_index_fn(source, target)`."""
    f = lerp_index_fn(source, target)
    if isinstance(over, Space):
        return over.map(f)
    return map(f, over)
