from dataclasses import dataclass
from typing import Any, Tuple

from .grid import axis_bounds
from .space import Bounds, Space, SpaceError
from .step import Step, step_for


@dataclass(frozen=True)
class GridStepInterpolation:
    """
    Interpolates a flat index into one stepped value per axis.

    The first axis varies fastest (column-major).

    Attributes:
        axes: (start, steps, stepper) for each axis.
    """
    axes: Tuple[Tuple[Any, int, Step], ...]

    @property
    def length(self) -> int:
        n = 1
        for _, steps, _ in self.axes:
            n *= steps
        return n

    def interpolate(self, x: int) -> Tuple[Any, ...]:
        out = []
        for start, steps, stepper in self.axes:
            x, z = divmod(x, steps)
            out.append(stepper.forward(start, z))
        return tuple(out)


def grid_step(start, end, endpoint: bool = False) -> Space:
    """
    Creates a space over every point of a discrete grid, e.g. of integers or characters.

    Args:
        start: The first value of each axis.
        end: The end value of each axis.
        endpoint (bool): Whether the end values are included. Exclusive by
            default, like `range`.

    Returns:
        Space: A lazy space over tuples. The first axis varies fastest.

    Raises:
        SpaceError: If an axis ends before it starts.

    Examples:
        >>> list(grid_step((0, 0), (2, 2)))
        [(0, 0), (1, 0), (0, 1), (1, 1)]
        >>> list(grid_step(("a", 0), ("b", 1), endpoint=True))
        [('a', 0), ('b', 0), ('a', 1), ('b', 1)]
    """
    axes = []
    for i, (s, e) in enumerate(axis_bounds(start, end)):
        stepper = step_for(s)
        if step_for(e) is not stepper:
            raise TypeError(f"axis {i} starts at {s!r} but ends at {e!r}")
        steps = stepper.steps_between(s, e)
        if steps is None:
            raise SpaceError(f"axis {i} ends at {e!r} before it starts at {s!r}")
        if endpoint:
            steps += 1
        axes.append((s, steps, stepper))
    interpolation = GridStepInterpolation(tuple(axes))
    return Space(interpolation.length, interpolation, Bounds(tuple(start), tuple(end), endpoint))
