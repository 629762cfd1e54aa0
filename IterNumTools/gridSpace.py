from .grid import axis_bounds, broadcast, grid_from_axes
from .linspace import linear_interpolation
from .space import Bounds, Space, check_steps

def grid_space(start, end, steps, endpoint: bool = True) -> Space:
    """
    Creates a linear grid space, one `lin_space` per axis, in row-major order.

    Args:
        start: The start value of each axis.
        end: The end value of each axis.
        steps: The number of values along every axis, or one count per axis.
        endpoint (bool): Whether the end values are included.

    Returns:
        Space: A lazy space over tuples with one value per axis. The last axis
        varies fastest.

    Examples:
        >>> list(grid_space((0.0, 0.0), (1.0, 2.0), (2, 4), endpoint=False))
        [(0.0, 0.0), (0.0, 0.5), (0.0, 1.0), (0.0, 1.5), (0.5, 0.0), (0.5, 0.5), (0.5, 1.0), (0.5, 1.5)]
        >>> list(grid_space((0.0, 0.0), (1.0, 2.0), 3))[:4]
        [(0.0, 0.0), (0.0, 1.0), (0.0, 2.0), (0.5, 0.0)]
    """
    pairs = axis_bounds(start, end)
    counts = [check_steps(n) for n in broadcast(steps, len(pairs), "steps")]
    axes = [
        (linear_interpolation(s, e, n, endpoint), n)
        for (s, e), n in zip(pairs, counts)
    ]
    return grid_from_axes(axes, bounds=Bounds(tuple(start), tuple(end), endpoint))
