from .arange import arange_interpolation
from .grid import axis_bounds, broadcast, grid_from_axes
from .space import Bounds, Space

def arange_grid(start, end, step) -> Space:
    """
    Creates a grid space made of fixed step intervals, one `arange` per axis.

    `step` is either one step used along every axis or one step per axis.
    Each axis derives its own number of values.

    Examples:
        >>> list(arange_grid((0.0, 0.0), (1.0, 2.0), (0.5, 1.0)))
        [(0.0, 0.0), (0.0, 1.0), (0.5, 0.0), (0.5, 1.0)]
    """
    pairs = axis_bounds(start, end)
    axes = [
        arange_interpolation(s, e, d)
        for (s, e), d in zip(pairs, broadcast(step, len(pairs), "step"))
    ]
    return grid_from_axes(axes, bounds=Bounds(tuple(start), tuple(end), False))
