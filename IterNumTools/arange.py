import math
from typing import Tuple

import numpy as np

from .linspace import LinearInterpolation
from .space import ArangeError, Bounds, Space

def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)

def arange_interpolation(start, end, step) -> Tuple[LinearInterpolation, int]:
    """
    Builds the interpolation for stepping from `start` towards `end` by `step`.

    The number of values is `ceil((end - start) / step)`, computed exactly
    when the bounds and step are integers.

    Returns:
        A tuple of (interpolation, number of values).

    Raises:
        ArangeError: If `step` is zero, or points away from `end`, or the
            count is not finite.
    """
    if step == 0:
        raise ArangeError("step must be non-zero")
    span = end - start
    if (span > 0 and step < 0) or (span < 0 and step > 0):
        raise ArangeError(f"step {step} points away from {end} when starting at {start}")
    if _is_integer(span) and _is_integer(step):
        return LinearInterpolation(start, step), int(-(-span // step))
    try:
        steps = math.ceil(span / step)
    except (ZeroDivisionError, OverflowError, ValueError) as e:
        raise ArangeError(f"cannot step from {start} to {end} by {step}: {e}") from e
    return LinearInterpolation(start, step), steps

def arange(start, end, step) -> Space:
    """
    Creates a space from `start` up to (excluding) `end`, stepping by `step`.

    There is no inclusive version.

    Examples:
        >>> list(arange(0.0, 2.0, 0.5))
        [0.0, 0.5, 1.0, 1.5]
    """
    interpolation, steps = arange_interpolation(start, end, step)
    return Space(steps, interpolation, Bounds(start, end, False))
