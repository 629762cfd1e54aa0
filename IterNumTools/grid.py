"""
Composition of per-axis interpolations into a single grid space.

A grid over axes with step counts (n_0, ..., n_k) is a space of length
n_0 * ... * n_k. Each flat index is split back into per-axis indices like a
mixed-radix number, so grids keep every property of a one dimensional space.
"""
import math
from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from .space import Bounds, Interpolate, Space, SpaceError

ROW_MAJOR = "C"
COLUMN_MAJOR = "F"


@dataclass(frozen=True)
class GridInterpolation:
    """
    Interpolates a flat index into one value per axis.

    Attributes:
        axes: (interpolation, steps) for each axis.
        order (str): "C" for row-major (the last axis varies fastest, like
            nested for loops) or "F" for column-major (the first axis varies
            fastest).
    """
    axes: Tuple[Tuple[Interpolate, int], ...]
    order: str = ROW_MAJOR

    def __post_init__(self):
        if self.order not in (ROW_MAJOR, COLUMN_MAJOR):
            raise ValueError(f"order must be '{ROW_MAJOR}' or '{COLUMN_MAJOR}', got {self.order!r}")
        if not self.axes:
            raise SpaceError("a grid needs at least one axis")
        object.__setattr__(self, "axes", tuple((axis, int(steps)) for axis, steps in self.axes))

    @property
    def shape(self) -> Tuple[int, ...]:
        return tuple(steps for _, steps in self.axes)

    @property
    def length(self) -> int:
        return math.prod(self.shape)

    def interpolate(self, x: int) -> Tuple[Any, ...]:
        n = len(self.axes)
        out = [None] * n
        order = range(n - 1, -1, -1) if self.order == ROW_MAJOR else range(n)
        for i in order:
            axis, steps = self.axes[i]
            x, z = divmod(x, steps)
            out[i] = axis.interpolate(z)
        return tuple(out)


@dataclass(frozen=True)
class ShiftedInterpolation:
    """Interpolates `inner` at `x + offset`."""
    inner: Interpolate
    offset: int

    def interpolate(self, x: int):
        return self.inner.interpolate(x + self.offset)


def _is_axes(value) -> bool:
    return isinstance(value, (list, tuple, np.ndarray))

def axis_bounds(start: Sequence, end: Sequence) -> List[Tuple[Any, Any]]:
    """Pairs up the per-axis start and end values of a grid."""
    if not _is_axes(start) or not _is_axes(end):
        raise TypeError("grid bounds must be sequences with one value per axis")
    if len(start) != len(end):
        raise SpaceError(f"start has {len(start)} axes but end has {len(end)}")
    if len(start) == 0:
        raise SpaceError("a grid needs at least one axis")
    return list(zip(start, end))

def broadcast(value, n: int, name: str) -> Tuple[Any, ...]:
    """
    Expands a per-axis parameter: a scalar applies to every axis, a sequence
    must give exactly one value per axis.
    """
    if not _is_axes(value):
        return (value,) * n
    if len(value) != n:
        raise SpaceError(f"{name} has {len(value)} values for a grid with {n} axes")
    return tuple(value)

def grid_from_axes(axes, order: str = ROW_MAJOR, bounds: Optional[Bounds] = None) -> Space:
    """Creates the space over a grid of (interpolation, steps) axes."""
    interpolation = GridInterpolation(tuple(axes), order)
    return Space(interpolation.length, interpolation, bounds)

def grid(*spaces: Space) -> Space:
    """
    Creates the cartesian product of the remaining values of several spaces.

    The result is itself a space: exact-size and double-ended. The last
    space varies fastest.

    Examples:
        >>> from IterNumTools import arange
        >>> list(grid(arange(0, 2, 1), arange(2, 4, 1)))
        [(0, 2), (0, 3), (1, 2), (1, 3)]
    """
    axes = []
    for space in spaces:
        if not isinstance(space, Space):
            raise TypeError(f"grid axes must be spaces, not {type(space).__name__}")
        axis = space.interpolation
        if space.lo:
            axis = ShiftedInterpolation(axis, space.lo)
        axes.append((axis, len(space)))
    return grid_from_axes(axes)
