"""
Logarithmically spaced spaces.
"""
from dataclasses import dataclass
from typing import Any, Optional

from .space import Bounds, Space, SpaceError, StepCountError, check_steps

@dataclass(frozen=True)
class LogarithmicInterpolation:
    """
    Computes `start * ratio ** x` for a step index `x`.

    Attributes:
        start: The value at index 0. Must be positive.
        ratio: The factor between consecutive values.
        end: Returned as is at index `last`.
        last (int, optional): The index pinned to `end`.
    """
    start: Any
    ratio: Any
    end: Any = None
    last: Optional[int] = None

    def interpolate(self, x: int):
        if x == self.last:
            return self.end
        return self.start * self.ratio ** x


def logarithmic_interpolation(start, end, steps: int, endpoint: bool = True) -> LogarithmicInterpolation:
    """
    Builds the interpolation for `steps` values from `start` to `end` with a
    constant ratio between neighbours.

    Raises:
        SpaceError: If `start` or `end` is not positive.
        StepCountError: If `endpoint` is True and `steps` is 0.
    """
    if start <= 0 or end <= 0:
        raise SpaceError("start and end values must be positive for logarithmic spacing.")
    steps = check_steps(steps)
    if not endpoint:
        return LogarithmicInterpolation(start, (end / start) ** (1 / (steps or 1)))
    if steps == 0:
        raise StepCountError("division by zero step count: an inclusive space needs at least 1 step")
    if steps == 1:
        return LogarithmicInterpolation(start, end / start)
    return LogarithmicInterpolation(start, (end / start) ** (1 / (steps - 1)), end / 1, steps - 1)


def log_space(start, end, steps: int, endpoint: bool = True) -> Space:
    """
    Creates a logarithmic space from `start` to `end` with a fixed number of values.

    Examples:
        >>> [round(v, 6) for v in log_space(1.0, 1000.0, 4)]
        [1.0, 10.0, 100.0, 1000.0]
        >>> [round(v, 6) for v in log_space(1.0, 1000.0, 3, endpoint=False)]
        [1.0, 10.0, 100.0]
    """
    interpolation = logarithmic_interpolation(start, end, steps, endpoint)
    return Space(steps, interpolation, Bounds(start, end, endpoint))
