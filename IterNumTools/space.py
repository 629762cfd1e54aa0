"""
The index-driven lazy sequence shared by every space in the package.

A `Space` owns an interpolation strategy and the half-open range of indices
`[lo, hi)` it has not produced yet. Values are computed from the index on
demand, so iterating from either end, skipping and measuring are all O(1).
"""
import copy
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Protocol

import numpy as np


class SpaceError(Exception):
    """Raised when a space cannot be built from the given bounds and steps."""
    pass

class StepCountError(SpaceError, ZeroDivisionError):
    """Raised when a step count is invalid, e.g. an inclusive space with 0 steps."""
    pass

class ArangeError(SpaceError, ValueError):
    """Raised when a fixed step does not divide its range into a finite, non-negative count."""
    pass


class Interpolate(Protocol):
    """Anything mapping a step index to a value. Must be a pure function of `x`."""
    def interpolate(self, x: int) -> Any: ...


@dataclass(frozen=True)
class Bounds:
    """
    The declared bounds of a space in the value domain.

    Attributes:
        start: The first value of the space.
        end: The end value. Included in the space when `inclusive` is True.
        inclusive (bool): Whether `end` is one of the produced values.
    """
    start: Any
    end: Any
    inclusive: bool


@dataclass(frozen=True)
class MappedInterpolation:
    """Applies `func` to every value produced by `inner`."""
    inner: Interpolate
    func: Callable[[Any], Any]

    def interpolate(self, x: int):
        return self.func(self.inner.interpolate(x))


def check_steps(steps) -> int:
    """Validates a step count, returning it as an int."""
    if isinstance(steps, (bool, float)) or not isinstance(steps, (int, np.integer)):
        raise TypeError(f"step count must be an integer, not {type(steps).__name__}")
    steps = int(steps)
    if steps < 0:
        raise StepCountError(f"step count must be non-negative, got {steps}")
    return steps


class Space:
    """
    A double-ended, exact-size iterator over `interpolation.interpolate(i)`
    for `i` in `[0, length)`.

    Examples:
        >>> from IterNumTools import lin_space
        >>> it = lin_space(0.0, 5.0, 5, endpoint=False)
        >>> next(it), it.next_back(), len(it)
        (0.0, 4.0, 3)
        >>> list(it)
        [1.0, 2.0, 3.0]

    A space is single pass. Use `clone()` to get an independent cursor over
    the values that are left.
    """
    def __init__(self, length: int, interpolation: Interpolate, bounds: Optional[Bounds] = None):
        length = check_steps(length)
        self.interpolation = interpolation
        self.bounds = bounds
        self.lo = 0
        self.hi = length

    def __repr__(self):
        return f"{type(self).__name__}({self.interpolation!r}, range({self.lo}, {self.hi}))"

    def __iter__(self):
        return self

    def __next__(self):
        if self.lo >= self.hi:
            raise StopIteration
        x = self.lo
        self.lo += 1
        return self.interpolation.interpolate(x)

    def next_back(self):
        """Returns the last remaining value, or None once the space is exhausted."""
        if self.lo >= self.hi:
            return None
        self.hi -= 1
        return self.interpolation.interpolate(self.hi)

    def __reversed__(self) -> Iterator:
        while self.lo < self.hi:
            yield self.next_back()

    def __len__(self) -> int:
        return self.hi - self.lo

    def advance_by(self, n: int) -> int:
        """
        Skips `n` values from the front without computing them.

        Returns:
            int: How many of the `n` values could not be skipped because the
            space ran out, 0 if all of them were.
        """
        if n < 0:
            raise ValueError("n must be non-negative")
        skipped = min(n, self.hi - self.lo)
        self.lo += skipped
        return n - skipped

    def advance_back_by(self, n: int) -> int:
        """Like `advance_by`, from the back."""
        if n < 0:
            raise ValueError("n must be non-negative")
        skipped = min(n, self.hi - self.lo)
        self.hi -= skipped
        return n - skipped

    def nth(self, n: int):
        """
        Skips `n` values and returns the next one.

        If fewer than `n + 1` values remain the space is exhausted and None
        is returned.
        """
        if self.advance_by(n):
            return None
        return next(self, None)

    def nth_back(self, n: int):
        """Skips `n` values from the back and returns the one before them."""
        if self.advance_back_by(n):
            return None
        return self.next_back()

    def count(self) -> int:
        """Consumes the space, returning how many values it had left."""
        n = len(self)
        self.lo = self.hi
        return n

    def last(self):
        """Consumes the space, returning its final value (or None if empty)."""
        value = self.next_back()
        self.lo = self.hi
        return value

    def __getitem__(self, i: int | slice):
        if isinstance(i, slice):
            start, stop, step = i.indices(len(self))
            if step == 1:
                sub = self.clone()
                sub.lo = self.lo + start
                sub.hi = self.lo + max(start, stop)
                return sub
            return [self.interpolation.interpolate(self.lo + j) for j in range(start, stop, step)]

        if isinstance(i, bool) or not isinstance(i, (int, np.integer)):
            raise TypeError(f"Index must be an integer, not {type(i).__name__}")

        if i < 0:
            i += len(self)

        if not 0 <= i < len(self):
            raise IndexError("Index out of range")

        return self.interpolation.interpolate(self.lo + int(i))

    def clone(self) -> "Space":
        """Returns an independent cursor over the remaining values."""
        return copy.copy(self)

    def map(self, func: Callable[[Any], Any]) -> "Space":
        """
        Returns a space producing `func(value)` for each remaining value.

        Unlike the builtin `map`, the result keeps its length and can still be
        consumed from the back. `func` should be pure.
        """
        mapped = Space(0, MappedInterpolation(self.interpolation, func))
        mapped.lo, mapped.hi = self.lo, self.hi
        return mapped

    def to_list(self) -> List[Any]:
        """Consumes the space into a list."""
        return list(self)

    def to_array(self, dtype=None) -> np.ndarray:
        """
        Consumes the space into a numpy array.

        Grid spaces give an array of shape (len, axes), also when empty.
        """
        values = self.to_list()
        if not values:
            axes = getattr(self.interpolation, "axes", None)
            shape = (0,) if axes is None else (0, len(axes))
            return np.empty(shape, dtype=dtype if dtype is not None else float)
        return np.asarray(values, dtype=dtype)

    def sum2(self, start=0):
        """Sums the remaining values. See `IterNumTools.accum.sum2`."""
        from .accum import sum2
        return sum2(self, start)

    def product2(self, start=1):
        """Multiplies the remaining values. See `IterNumTools.accum.product2`."""
        from .accum import product2
        return product2(self, start)
