"""
Evenly spaced linear spaces.
"""
from dataclasses import dataclass
from typing import Any, Optional

from .space import Bounds, Space, StepCountError, check_steps


@dataclass(frozen=True)
class LinearInterpolation:
    """
    Computes `start + x * step` for a step index `x`.

    The value is always recomputed from `start` rather than accumulated, so
    there is no drift however far into the space an index lies.

    Attributes:
        start: The value at index 0.
        step: The distance between consecutive values.
        end: Returned as is at index `last`. Lets inclusive spaces finish on
            their declared end value instead of a rounded one.
        last (int, optional): The index pinned to `end`.
    """
    start: Any
    step: Any
    end: Any = None
    last: Optional[int] = None

    def interpolate(self, x: int):
        if x == self.last:
            return self.end
        return self.start + x * self.step


def linear_interpolation(start, end, steps: int, endpoint: bool = True) -> LinearInterpolation:
    """
    Builds the interpolation for `steps` evenly spaced values from `start` to `end`.

    Raises:
        StepCountError: If `endpoint` is True and `steps` is 0.
    """
    steps = check_steps(steps)
    if not endpoint:
        # an empty space never applies its step
        return LinearInterpolation(start, (end - start) / (steps or 1))
    if steps == 0:
        raise StepCountError("division by zero step count: an inclusive space needs at least 1 step")
    if steps == 1:
        return LinearInterpolation(start, (end - start) / 1)
    # end / 1 keeps the pinned value in the type the divided steps produce
    return LinearInterpolation(start, (end - start) / (steps - 1), end / 1, steps - 1)


def lin_space(start, end, steps: int, endpoint: bool = True) -> Space:
    """
    Creates a linear space from `start` to `end` with a fixed number of values.

    Args:
        start: The first value.
        end: The last value if `endpoint` is True, otherwise the value one
            step past the last one.
        steps (int): How many values the space produces.
        endpoint (bool): Whether `end` is included.

    Returns:
        Space: A lazy space over the values.

    Examples:
        >>> list(lin_space(20.0, 21.0, 3))
        [20.0, 20.5, 21.0]
        >>> list(lin_space(20.0, 21.0, 2, endpoint=False))
        [20.0, 20.5]
    """
    interpolation = linear_interpolation(start, end, steps, endpoint)
    return Space(steps, interpolation, Bounds(start, end, endpoint))
